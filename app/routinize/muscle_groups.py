"""
Muscle-group volume landmarks.

Weekly set counts (hard sets) per muscle group and experience level:

- **MEV**: minimum effective volume, below it there is no stimulus,
- **MAV**: maximum adaptive volume, the productive ceiling,
- **MRV**: maximum recoverable volume, above it recovery fails.

Display names in Spanish are accepted as aliases since that is how
exercises in the built-in catalogs are tagged.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

LEVELS: tuple[str, ...] = ("beginner", "intermediate", "advanced")


class MuscleGroupData(BaseModel):
    """Static landmarks for one muscle group."""

    name: str
    spanish_name: str
    mev: dict[str, int]
    mav: dict[str, int]
    mrv: dict[str, int]
    recovery_time_hours: int

    def landmarks(self, level: str) -> tuple[int, int, int]:
        """``(mev, mav, mrv)`` for *level*.

        Raises:
            ValueError: for an unknown experience level.
        """
        if level not in LEVELS:
            raise ValueError(f"Unknown experience level '{level}'. Expected one of {list(LEVELS)}")
        return self.mev[level], self.mav[level], self.mrv[level]


def _group(name: str, spanish_name: str, mev: tuple, mav: tuple, mrv: tuple, recovery: int) -> MuscleGroupData:
    return MuscleGroupData(
        name=name,
        spanish_name=spanish_name,
        mev=dict(zip(LEVELS, mev)),
        mav=dict(zip(LEVELS, mav)),
        mrv=dict(zip(LEVELS, mrv)),
        recovery_time_hours=recovery,
    )


MUSCLE_GROUPS: list[MuscleGroupData] = [
    _group("chest", "Pecho", (6, 8, 10), (14, 18, 22), (18, 22, 26), 48),
    _group("back", "Espalda", (8, 10, 12), (16, 20, 25), (20, 25, 30), 48),
    _group("shoulders", "Hombros", (6, 8, 10), (12, 16, 20), (16, 20, 24), 36),
    _group("quadriceps", "Cuádriceps", (8, 10, 12), (16, 20, 25), (20, 25, 30), 72),
    _group("hamstrings", "Isquiotibiales", (6, 8, 10), (12, 16, 20), (16, 20, 24), 72),
    _group("glutes", "Glúteos", (6, 8, 10), (14, 18, 22), (18, 22, 26), 48),
    _group("biceps", "Bíceps", (4, 6, 8), (10, 14, 18), (14, 18, 22), 36),
    _group("triceps", "Tríceps", (4, 6, 8), (10, 14, 18), (14, 18, 22), 36),
    _group("calves", "Pantorrillas", (6, 8, 10), (12, 16, 20), (16, 20, 24), 24),
    _group("abs", "Abdominales", (6, 8, 10), (12, 16, 20), (16, 20, 24), 24),
]

_BY_NAME: dict[str, MuscleGroupData] = {g.name: g for g in MUSCLE_GROUPS}
_SPANISH_ALIASES: dict[str, str] = {g.spanish_name.lower(): g.name for g in MUSCLE_GROUPS}


def normalize_muscle_group(name: str) -> str:
    """Canonical (English, lower-case) key for a muscle-group label.

    Spanish display names (any case) map to their English key; anything
    else is lower-cased and stripped.
    """
    key = name.strip().lower()
    return _SPANISH_ALIASES.get(key, key)


def get_muscle_group(name: str) -> Optional[MuscleGroupData]:
    """Landmark data for *name* (either language), or ``None``."""
    return _BY_NAME.get(normalize_muscle_group(name))
