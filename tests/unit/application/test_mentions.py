"""Unit tests for #tag extraction."""

import pytest

from pingtag.application.mentions import extract_tag_names


class TestExtractTagNames:
    def test_extracts_in_order_of_appearance(self):
        assert extract_tag_names("lunch? #lunch then #games") == ["lunch", "games"]

    def test_repeated_mentions_are_kept(self):
        assert extract_tag_names("#a and #a again") == ["a", "a"]

    def test_cyrillic_digits_and_underscore(self):
        text = "#обед в 12, #ёлка_2025 и #Team_1"

        assert extract_tag_names(text) == ["обед", "ёлка_2025", "Team_1"]

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("#lunch!", ["lunch"]),
            ("#lunch-time", ["lunch"]),
            ("x#lunch", ["lunch"]),
            ("##lunch", ["lunch"]),
        ],
    )
    def test_name_stops_at_other_characters(self, text, expected):
        assert extract_tag_names(text) == expected

    @pytest.mark.parametrize("text", ["", "no tags here", "# alone", "#-", "#é"])
    def test_no_candidates(self, text):
        assert extract_tag_names(text) == []
