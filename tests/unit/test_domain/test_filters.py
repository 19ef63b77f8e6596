"""Tests for FilterSet."""

import pytest


def test_filter_set_defaults_are_unset():
    from runmate.domain.filters import FilterSet

    filters = FilterSet()

    assert filters.is_empty() is True
    assert filters.to_query_params() == {}


def test_filter_set_query_params_use_backend_names():
    from runmate.domain.filters import FilterSet

    filters = FilterSet(
        search="vapor", category="super", min_price="100", max_price="250", min_rating="4"
    )

    assert filters.to_query_params() == {
        "search": "vapor",
        "category": "super",
        "minPrice": "100",
        "maxPrice": "250",
        "minRating": "4",
    }


def test_filter_set_equality_drives_refetch():
    from runmate.domain.filters import FilterSet

    assert FilterSet(search="a") == FilterSet().with_changes(search="a")
    assert FilterSet(search="a") != FilterSet(search="b")


def test_with_changes_normalizes_values():
    from runmate.domain.filters import FilterSet

    filters = FilterSet(min_price="10").with_changes(min_price=None, max_price=80, min_rating=3.5)

    assert filters.min_price == ""
    assert filters.max_price == "80"
    assert filters.min_rating == "3.5"


def test_with_changes_keeps_malformed_text():
    from runmate.domain.filters import FilterSet

    filters = FilterSet().with_changes(min_price="ten")

    assert filters.to_query_params() == {"minPrice": "ten"}


def test_with_changes_rejects_unknown_field():
    from runmate.domain.filters import FilterSet

    with pytest.raises(ValueError):
        FilterSet().with_changes(colour="red")


def test_known_categories():
    from runmate.domain.filters import CATEGORIES, RATING_OPTIONS

    assert [value for value, _ in CATEGORIES] == ["lsd", "daily", "tempo", "super", "sports"]
    assert [value for value, _ in RATING_OPTIONS] == ["4", "3", "2", "1"]
