import math
from datetime import datetime, timezone

import pytest

from lore_archive.applications.use_cases.book.get_books import BOOK_FILTERS
from lore_archive.applications.use_cases.character.get_characters import CHARACTER_FILTERS
from lore_archive.domain.models.filters import (
    Contains,
    Equals,
    FilterConfig,
    FilterType,
    InvalidDate,
    OneOf,
    Range,
)
from lore_archive.domain.services.filter_builder import FilterBuilder


class TestFilterBuilder:
    def test_text_becomes_case_insensitive_substring_match(self):
        configs = {"title": FilterConfig(field="title", type=FilterType.TEXT)}

        predicate = FilterBuilder.build({"title": "Storm"}, configs)

        assert predicate == {"title": Contains("Storm", case_insensitive=True)}

    def test_number_bounds_merge_into_one_range(self):
        configs = {
            "publication_year_min": FilterConfig(field="publication_year", type=FilterType.NUMBER),
            "publication_year_max": FilterConfig(field="publication_year", type=FilterType.NUMBER),
        }

        predicate = FilterBuilder.build({"publication_year_min": "1990", "publication_year_max": "2000"}, configs)

        assert predicate == {"publication_year": Range(gte=1990, lte=2000)}

    def test_number_bounds_merge_regardless_of_config_order(self):
        configs = {
            "age_max": FilterConfig(field="age", type=FilterType.NUMBER),
            "age_min": FilterConfig(field="age", type=FilterType.NUMBER),
        }

        predicate = FilterBuilder.build({"age_min": "18", "age_max": "40"}, configs)

        assert predicate == {"age": Range(gte=18, lte=40)}

    def test_single_bound_leaves_other_side_open(self):
        predicate = FilterBuilder.build({"age_min": "18"}, CHARACTER_FILTERS)

        assert predicate == {"age": Range(gte=18, lte=None)}

    def test_plain_number_is_equality(self):
        predicate = FilterBuilder.build({"publication_year": "1994"}, BOOK_FILTERS)

        assert predicate == {"publication_year": Equals(1994)}

    def test_decimal_number_is_parsed_as_float(self):
        configs = {"rating": FilterConfig(field="rating", type=FilterType.NUMBER)}

        predicate = FilterBuilder.build({"rating": "4.5"}, configs)

        assert predicate == {"rating": Equals(4.5)}

    @pytest.mark.parametrize("raw", ["1_990", "_1990"])
    def test_underscored_number_becomes_nan(self, raw):
        predicate = FilterBuilder.build({"publication_year": raw}, BOOK_FILTERS)

        assert math.isnan(predicate["publication_year"].value)

    def test_non_numeric_number_becomes_nan(self):
        predicate = FilterBuilder.build({"publication_year_min": "abc"}, BOOK_FILTERS)

        condition = predicate["publication_year"]
        assert isinstance(condition, Range)
        assert math.isnan(condition.gte)
        assert condition.lte is None

    def test_array_string_is_split_trimmed_and_empties_dropped(self):
        configs = {"species": FilterConfig(field="species", type=FilterType.ARRAY)}

        predicate = FilterBuilder.build({"species": "a,b, c,,"}, configs)

        assert predicate == {"species": OneOf(("a", "b", "c"))}

    def test_array_list_keeps_each_element(self):
        configs = {"species": FilterConfig(field="species", type=FilterType.ARRAY)}

        predicate = FilterBuilder.build({"species": ["a", "b,c"]}, configs)

        assert predicate == {"species": OneOf(("a", "b,c"))}

    def test_date_bounds_merge_into_one_range(self):
        predicate = FilterBuilder.build(
            {"created_from": "2024-01-01T00:00:00Z", "created_to": "2024-06-30"}, BOOK_FILTERS
        )

        assert predicate == {
            "created_at": Range(gte=datetime(2024, 1, 1, tzinfo=timezone.utc), lte=datetime(2024, 6, 30))
        }

    def test_year_only_date_is_start_of_year(self):
        configs = {"released": FilterConfig(field="released", type=FilterType.DATE)}

        predicate = FilterBuilder.build({"released": "1999"}, configs)

        assert predicate == {"released": Equals(datetime(1999, 1, 1))}

    @pytest.mark.parametrize("raw", ["yesterday", "2024-13-45", "0000"])
    def test_unparseable_date_becomes_invalid_marker(self, raw):
        predicate = FilterBuilder.build({"created_from": raw}, BOOK_FILTERS)

        assert predicate == {"created_at": Range(gte=InvalidDate(raw))}

    @pytest.mark.parametrize("raw, expected", [("true", True), ("TRUE", True), ("false", False), ("yes", False)])
    def test_boolean(self, raw, expected):
        configs = {"published": FilterConfig(field="is_published", type=FilterType.BOOLEAN)}

        predicate = FilterBuilder.build({"published": raw}, configs)

        assert predicate == {"is_published": Equals(expected)}

    @pytest.mark.parametrize("value", [None, "", []])
    def test_empty_parameters_are_skipped(self, value):
        predicate = FilterBuilder.build({"title": value}, BOOK_FILTERS)

        assert predicate == {}

    def test_unconfigured_parameters_are_ignored(self):
        predicate = FilterBuilder.build({"page": "2", "limit": "5", "colour": "red", "title": "Way"}, BOOK_FILTERS)

        assert predicate == {"title": Contains("Way")}

    def test_predicate_only_uses_configured_field_names(self):
        params = {
            "title": "Way",
            "publication_year_min": "1990",
            "created_to": "2024-01-01",
        }

        predicate = FilterBuilder.build(params, BOOK_FILTERS)

        assert set(predicate) <= {config.field for config in BOOK_FILTERS.values()}
        assert set(predicate) == {"title", "publication_year", "created_at"}

    def test_repeated_text_parameter_uses_first_value(self):
        predicate = FilterBuilder.build({"title": ["Way", "Kings"]}, BOOK_FILTERS)

        assert predicate == {"title": Contains("Way")}

    def test_build_is_pure(self):
        params = {"species": "a,b", "age_min": "3", "name": "Kal"}
        snapshot = dict(params)

        first = FilterBuilder.build(params, CHARACTER_FILTERS)
        second = FilterBuilder.build(params, CHARACTER_FILTERS)

        assert first == second
        assert params == snapshot
