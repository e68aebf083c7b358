# SPDX-License-Identifier: MIT
"""Tests for date normalization."""

import pytest

from linked_places.normalizers import format_date, year_added


class TestFormatDate:
    """ISO dates become DD/MM/YYYY."""

    def test_iso_date(self):
        assert format_date("2020-03-15") == "15/03/2020"

    def test_timestamp_suffix_ignored(self):
        assert format_date("2010-09-23T12:44:01Z") == "23/09/2010"

    def test_surrounding_whitespace(self):
        assert format_date(" 1990-01-01 ") == "01/01/1990"

    @pytest.mark.parametrize("value", ["", None, "not-a-date", "2020-13-01", "2021-02-30", "15/03/2020"])
    def test_invalid_is_none(self, value):
        """Unparseable dates resolve to None rather than raising."""
        assert format_date(value) is None


class TestYearAdded:
    """Year extraction from the normalized date."""

    def test_year(self):
        assert year_added(format_date("2020-03-15")) == "2020"

    def test_none_for_missing_date(self):
        assert year_added(format_date("")) is None

    def test_none_for_malformed_display_date(self):
        assert year_added("2020-03-15") is None


class TestEarlyYears:
    """Years below 1000 keep four digits."""

    def test_zero_padded_year(self):
        assert format_date("0099-03-15") == "15/03/0099"

    def test_year_added_for_early_date(self):
        assert year_added(format_date("0099-03-15")) == "0099"

    def test_unpadded_display_date_rejected(self):
        assert year_added("15/03/99") is None
