"""
Food alternatives: rank foods by macro similarity to an original.

For every candidate (the original itself excluded)::

    score = Δcal / max(cal, 1)  × 0.4
          + Δprot / max(prot, 1) × 0.3
          + Δcarb / max(carb, 1) × 0.2
          + Δfat / max(fat, 1)   × 0.1

where Δ is the absolute difference per serving and the denominators
are the original's values.  Lower is closer.

Ranking is done in three passes:

1. keep the ``limit`` closest candidates by score,
2. optionally filter them by a text query (name, brand or category),
3. re-sort by the requested criterion.

The text filter runs *after* the cut so it narrows the closest matches
rather than searching the whole database.
"""

from __future__ import annotations

from typing import Iterable, Optional

from sqlmodel import Session

from app.db.repositories.food import FoodRepository
from app.models.food import FoodItem
from app.routinize.utils import round_half_up
from app.schemas.food import FoodAlternative, FoodAlternativesResponse, FoodResponse

# ======================================================================
# Configuration
# ======================================================================

_MACRO_WEIGHTS: dict[str, float] = {
    "calories": 0.4,
    "protein": 0.3,
    "carbs": 0.2,
    "fat": 0.1,
}

# (upper bound exclusive, label); anything above the last bound is "poor".
_MATCH_THRESHOLDS: list[tuple[float, str]] = [
    (0.15, "excellent"),
    (0.3, "good"),
    (0.5, "fair"),
]

DEFAULT_LIMIT = 20

_SORT_KEYS = {
    "similarity": lambda alt: alt.similarity_score,
    "calories": lambda alt: alt.calories_diff,
    "protein": lambda alt: alt.protein_diff,
}


# ======================================================================
# Pure helpers
# ======================================================================


def _similarity_score(original, candidate) -> float:
    score = 0.0
    for macro, weight in _MACRO_WEIGHTS.items():
        base = max(getattr(original, macro), 1.0)
        score += abs(getattr(candidate, macro) - getattr(original, macro)) / base * weight
    return score


def _match_label(score: float) -> str:
    for bound, label in _MATCH_THRESHOLDS:
        if score < bound:
            return label
    return "poor"


def _compare(original: FoodItem, candidate: FoodItem) -> FoodAlternative:
    score = _similarity_score(original, candidate)
    return FoodAlternative(
        food=FoodResponse.model_validate(candidate),
        calories_diff=abs(candidate.calories - original.calories),
        protein_diff=abs(candidate.protein - original.protein),
        carbs_diff=abs(candidate.carbs - original.carbs),
        fat_diff=abs(candidate.fat - original.fat),
        similarity_score=round(score, 4),
        similarity_percent=round_half_up(max(0.0, 100.0 - score * 100.0)),
        nutritional_match=_match_label(score),
    )


def _matches_query(alternative: FoodAlternative, query: str) -> bool:
    food = alternative.food
    needle = query.lower()
    return (
        needle in food.name.lower()
        or (food.brand is not None and needle in food.brand.lower())
        or (food.category is not None and needle in food.category.lower())
    )


def rank_alternatives(
    original: FoodItem,
    candidates: Iterable[FoodItem],
    limit: int = DEFAULT_LIMIT,
    query: Optional[str] = None,
    sort_by: str = "similarity",
) -> list[FoodAlternative]:
    """Rank *candidates* as replacements for *original*.

    Raises:
        ValueError: for an unknown *sort_by* or a non-positive *limit*.
    """
    if sort_by not in _SORT_KEYS:
        raise ValueError(f"Unknown sort criterion '{sort_by}'. Expected one of {list(_SORT_KEYS)}")
    if limit < 1:
        raise ValueError("limit must be at least 1")

    comparisons = [_compare(original, c) for c in candidates if c.id != original.id]
    comparisons.sort(key=_SORT_KEYS["similarity"])
    shortlist = comparisons[:limit]

    if query and query.strip():
        shortlist = [alt for alt in shortlist if _matches_query(alt, query.strip())]

    shortlist.sort(key=_SORT_KEYS[sort_by])
    return shortlist


# ======================================================================
# Public API
# ======================================================================


def compute_food_alternatives(
    session: Session,
    original: FoodItem,
    limit: int = DEFAULT_LIMIT,
    query: Optional[str] = None,
    sort_by: str = "similarity",
) -> FoodAlternativesResponse:
    """Rank every other food in the database against *original*."""
    candidates = FoodRepository(session).get_all()
    return FoodAlternativesResponse(
        original=FoodResponse.model_validate(original),
        sort_by=sort_by,
        alternatives=rank_alternatives(original, candidates, limit, query, sort_by),
    )
