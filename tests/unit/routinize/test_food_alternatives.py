"""Tests for macro-similarity ranking of food alternatives."""

import pytest

from app.models.food import FoodItem
from app.routinize.food_alternatives import _match_label, _similarity_score, rank_alternatives
from app.routinize.food_catalog import CATALOG_PREFIX, catalog_items


def _food(food_id, name, calories, protein, carbs, fat, brand=None, category="Carnes"):
    return FoodItem(id=food_id, name=name, brand=brand, category=category, calories=calories, protein=protein,
                    carbs=carbs, fat=fat)


@pytest.fixture
def original():
    return _food(1, "Pechuga de pollo", 100, 20, 10, 5)


@pytest.fixture
def candidates(original):
    return [
        original,
        _food(2, "Pechuga de pavo", 110, 22, 10, 5, brand="Hacendado"),
        _food(3, "Lentejas", 150, 10, 20, 10, category="Legumbres"),
        _food(4, "Lomo", 120, 20, 15, 5),
        _food(5, "Solomillo", 100, 20, 10, 5),
    ]


class TestSimilarityScore:
    def test_identical_is_zero(self, original):
        assert _similarity_score(original, original) == 0.0

    def test_weighted_relative_difference(self, original, candidates):
        assert _similarity_score(original, candidates[1]) == pytest.approx(0.07)
        assert _similarity_score(original, candidates[2]) == pytest.approx(0.65)
        assert _similarity_score(original, candidates[3]) == pytest.approx(0.18)

    def test_zero_macro_uses_unit_denominator(self):
        oil = _food(1, "Aceite", 884, 0, 0, 100)
        other = _food(2, "Mantequilla", 884, 0.5, 0, 100)
        assert _similarity_score(oil, other) == pytest.approx(0.5 * 0.3)

    @pytest.mark.parametrize("score, label", [
        (0.0, "excellent"),
        (0.149, "excellent"),
        (0.15, "good"),
        (0.29, "good"),
        (0.3, "fair"),
        (0.49, "fair"),
        (0.5, "poor"),
        (2.0, "poor"),
    ])
    def test_match_label(self, score, label):
        assert _match_label(score) == label


class TestRankAlternatives:
    def test_excludes_original_and_orders_by_similarity(self, original, candidates):
        ranked = rank_alternatives(original, candidates)
        assert [alt.food.id for alt in ranked] == [5, 2, 4, 3]

    def test_comparison_fields(self, original, candidates):
        ranked = rank_alternatives(original, candidates)
        turkey = ranked[1]
        assert turkey.calories_diff == 10
        assert turkey.protein_diff == 2
        assert turkey.similarity_score == 0.07
        assert turkey.similarity_percent == 93
        assert turkey.nutritional_match == "excellent"

        lentils = ranked[-1]
        assert lentils.similarity_percent == 35
        assert lentils.nutritional_match == "poor"

    def test_limit_keeps_the_closest(self, original, candidates):
        ranked = rank_alternatives(original, candidates, limit=2)
        assert [alt.food.id for alt in ranked] == [5, 2]

    def test_query_filters_after_the_cut(self, original, candidates):
        assert rank_alternatives(original, candidates, limit=2, query="lentejas") == []
        ranked = rank_alternatives(original, candidates, query="lentejas")
        assert [alt.food.id for alt in ranked] == [3]

    @pytest.mark.parametrize("query, expected", [
        ("hacendado", [2]),
        ("LEGUMBRES", [3]),
        ("   ", [5, 2, 4, 3]),
    ])
    def test_query_matches_name_brand_or_category(self, original, candidates, query, expected):
        ranked = rank_alternatives(original, candidates, query=query)
        assert [alt.food.id for alt in ranked] == expected

    def test_sort_by_protein(self, original, candidates):
        ranked = rank_alternatives(original, candidates, sort_by="protein")
        assert [alt.food.id for alt in ranked] == [5, 4, 2, 3]

    def test_invalid_arguments(self, original, candidates):
        with pytest.raises(ValueError):
            rank_alternatives(original, candidates, sort_by="price")
        with pytest.raises(ValueError):
            rank_alternatives(original, candidates, limit=0)


class TestCatalog:
    def test_catalog_keys(self):
        items = catalog_items()
        assert len(items) == 30
        assert items[0].external_id == f"{CATALOG_PREFIX}1"
        assert items[-1].external_id == f"{CATALOG_PREFIX}30"
        assert len({item.external_id for item in items}) == 30

    def test_catalog_values(self):
        chicken = next(item for item in catalog_items() if item.name == "Pechuga de pollo")
        assert chicken.calories == 110.0
        assert chicken.protein == 23.0
        assert "Mercadona" in chicken.supermarkets
