# SPDX-License-Identifier: MIT
"""Tests for settings and the dataset registry."""

from pathlib import Path

import pytest

from linked_places.config import DATASETS, Settings, format_license, get_dataset
from linked_places.exceptions import UnknownDatasetError


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LP_DATASET", raising=False)
        settings = Settings(_env_file=None)

        assert settings.dataset == "pleiades"
        assert settings.input_path is None
        assert settings.json_indent == 2

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LP_DATASET", " Heritage_At_Risk ")
        monkeypatch.setenv("LP_OUTPUT_PATH", "site/data/har.json")

        settings = Settings(_env_file=None)

        assert settings.dataset == "heritage_at_risk"
        assert settings.output_path == Path("site/data/har.json")


class TestDatasetRegistry:

    def test_lookup_is_case_insensitive(self):
        assert get_dataset("PLEIADES") is DATASETS["pleiades"]

    def test_unknown(self):
        with pytest.raises(UnknownDatasetError):
            get_dataset("dare")

    def test_pleiades_authorities(self):
        assert [rule.column for rule in DATASETS["pleiades"].links] == [
            "wikidata", "wikipedia", "geonames", "nomisma", "tgn", "loc", "viaf", "trismegistos",
        ]

    def test_heritage_at_risk_links_to_pleiades_only(self):
        (rule,) = DATASETS["heritage_at_risk"].links
        assert rule.column == "pleiadesID"
        assert rule.url_prefix == "https://pleiades.stoa.org/places/"

    def test_configs_are_immutable(self):
        with pytest.raises(AttributeError):
            DATASETS["pleiades"].base_url = "https://example.org/"


class TestFormatLicense:

    @pytest.mark.parametrize("url,label", [
        ("https://creativecommons.org/licenses/by/3.0/", "CC BY"),
        ("https://creativecommons.org/licenses/by-sa/4.0/", "CC BY-SA"),
        ("https://creativecommons.org/licenses/by-nc-sa/2.0/", "CC BY-NC-SA"),
        ("https://creativecommons.org/publicdomain/zero/1.0/", "CC0"),
        ("https://www.nationalarchives.gov.uk/doc/open-government-licence/version/3/", "OGL"),
    ])
    def test_known(self, url, label):
        assert format_license(url) == label

    def test_unknown_returns_url(self):
        assert format_license("https://example.org/terms") == "https://example.org/terms"
