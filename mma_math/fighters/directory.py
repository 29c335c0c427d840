"""
Fighter directory: id <-> display name lookups plus display enrichment.

Usage:
    directory = FighterDirectory(names, ratings, pictures)

    directory.name_of("f1")        # "Jon Jones"
    directory.id_of("Jon Jones")   # "f1"
    directory.details_of("f1")     # FighterDetail(name=..., elo=..., pic_url=...)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from mma_math.config import DEFAULT_ELO, PLACEHOLDER_PIC_URL, UNKNOWN_FIGHTER_NAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FighterDetail:
    """
    Display record for a single fighter.

    Attributes:
        fighter_id: Stable fighter identifier
        name: Display name (UNKNOWN_FIGHTER_NAME if not in the directory)
        elo: Peak elo (DEFAULT_ELO if no record exists)
        pic_url: Headshot URL (PLACEHOLDER_PIC_URL if no picture exists)
    """

    fighter_id: str
    name: str
    elo: float
    pic_url: str


class FighterDirectory:
    """
    Read-only mapping between fighter ids and display names.

    Names are not unique. Name lookups use the first id, in the name
    map's iteration order, whose name matches exactly; callers that need
    a specific fighter should look up by id.

    Lookups never raise: unknown ids get sentinel names and default
    ratings and pictures.
    """

    def __init__(
        self,
        names: Mapping[str, str],
        ratings: Mapping[str, float] | None = None,
        pictures: Mapping[str, str] | None = None,
        default_elo: float = DEFAULT_ELO,
        placeholder_pic_url: str = PLACEHOLDER_PIC_URL,
    ) -> None:
        """
        Initialize the directory.

        Args:
            names: Fighter id -> display name
            ratings: Fighter id -> peak elo
            pictures: Display name or fighter id -> picture URL
            default_elo: Elo reported for fighters without a rating
            placeholder_pic_url: URL reported for fighters without a picture
        """
        self._names = dict(names)
        self._ratings = dict(ratings or {})
        self._pictures = dict(pictures or {})
        self._default_elo = default_elo
        self._placeholder_pic_url = placeholder_pic_url

        # First id wins for duplicate names
        self._ids_by_name: dict[str, str] = {}
        duplicates = 0
        for fighter_id, name in self._names.items():
            if name in self._ids_by_name:
                duplicates += 1
                continue
            self._ids_by_name[name] = fighter_id

        if duplicates:
            logger.warning(
                f"{duplicates:,} fighters share a display name with an earlier fighter; "
                "name lookups resolve to the first one"
            )

    # =========================================================================
    # Core Lookups
    # =========================================================================

    def name_of(self, fighter_id: str) -> str:
        """Get display name by id, or UNKNOWN_FIGHTER_NAME if not found."""
        return self._names.get(fighter_id) or UNKNOWN_FIGHTER_NAME

    def id_of(self, name: str) -> str | None:
        """Get the first id whose display name equals name exactly, or None."""
        return self._ids_by_name.get(name)

    def details_of(self, fighter_id: str) -> FighterDetail:
        """Get the display record for a fighter, with defaults for missing data."""
        name = self.name_of(fighter_id)
        elo = self._ratings.get(fighter_id)
        pic_url = self._pictures.get(name) or self._pictures.get(fighter_id)

        return FighterDetail(
            fighter_id=fighter_id,
            name=name,
            elo=self._default_elo if elo is None else elo,
            pic_url=pic_url or self._placeholder_pic_url,
        )

    def has_fighter(self, fighter_id: str) -> bool:
        """Check if the id has a display name."""
        return fighter_id in self._names

    # =========================================================================
    # Batch Helpers
    # =========================================================================

    def names_of(self, fighter_ids: Iterable[str] | None) -> list[str]:
        """Map ids to display names. None maps to an empty list."""
        if fighter_ids is None:
            return []
        return [self.name_of(fighter_id) for fighter_id in fighter_ids]

    def details_for_path(self, fighter_ids: Iterable[str]) -> list[FighterDetail]:
        """Get display records for every fighter along a path."""
        return [self.details_of(fighter_id) for fighter_id in fighter_ids]

    def fighter_names(self) -> list[str]:
        """All distinct display names, sorted, for autocomplete inputs."""
        return sorted(self._ids_by_name)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, fighter_id: object) -> bool:
        return fighter_id in self._names
