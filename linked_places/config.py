"""
Configuration for the Linked Places transformer.

Uses pydantic-settings for runtime options (paths, log level) and a static
registry of dataset variants describing how each CSV layout maps onto the
Linked Places feature shape.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from linked_places.exceptions import UnknownDatasetError


class Settings(BaseSettings):
    """Runtime settings, overridable through LP_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="LP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Dataset variant to transform (key of DATASETS)
    dataset: str = "pleiades"

    # Optional overrides of the dataset's default paths
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    # Output formatting
    json_indent: int = 2

    @field_validator("dataset", mode="before")
    @classmethod
    def normalize_dataset(cls, v):
        """Dataset keys are lowercase identifiers."""
        return str(v).strip().lower()


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


settings = get_settings()


# =============================================================================
# Dataset Configuration
# =============================================================================

WIKIDATA_ENTITY_URL = "https://www.wikidata.org/wiki/"
PLEIADES_PLACE_URL = "https://pleiades.stoa.org/places/"

DEPICTION_WIDTH = 800
DEPICTION_LABEL = "A depiction of the heritage site sourced via Wikimedia Commons"
UNLOCATED = "unlocated"


@dataclass(frozen=True)
class LinkRule:
    """An authority identifier column rendered as a seeAlso link."""
    column: str
    url_prefix: str
    label_prefix: str


@dataclass(frozen=True)
class TypeRule:
    """An (authority id, local label) column pair rendered as a place type."""
    id_column: str
    label_column: str
    url_prefix: str = WIKIDATA_ENTITY_URL
    label_prefix: str = "A Wikidata type: "


@dataclass(frozen=True)
class Indexing:
    """Dataset-level metadata written to the FeatureCollection's indexing block."""
    name: str
    description: str
    license: str
    identifier: str
    context: str = "https://schema.org/"
    type: str = "Dataset"

    def to_dict(self) -> dict:
        return {
            "@context": self.context,
            "@type": self.type,
            "name": self.name,
            "description": self.description,
            "license": self.license,
            "identifier": self.identifier,
        }


@dataclass(frozen=True)
class DatasetConfig:
    """Everything needed to turn one CSV layout into Linked Places features."""
    key: str
    indexing: Indexing
    base_url: str
    default_input: Path
    default_output: Path

    id_column: str = "id"
    place_column: str = "title"
    description_column: str = "description"
    created_column: str = "created"
    modified_column: str = "modified"
    precision_column: str = "locationPrecision"
    lon_column: str = "reprLong"
    lat_column: str = "reprLat"
    image_column: str = "image_path_commons"
    feature_types_column: Optional[str] = None

    # Columns copied verbatim into properties (after the computed date fields)
    passthrough: tuple[str, ...] = ()
    # (column, label) pairs appended to the description text
    annotations: tuple[tuple[str, str], ...] = ()
    links: tuple[LinkRule, ...] = ()
    types: tuple[TypeRule, ...] = field(default_factory=lambda: (
        TypeRule(id_column="wikiInstanceOf", label_column="site_sub_type"),
        TypeRule(id_column="wikidataEntityID", label_column="heritage_category"),
    ))


PLEIADES_LINKS = (
    LinkRule("wikidata", WIKIDATA_ENTITY_URL, "A Wikidata entity: "),
    LinkRule("wikipedia", "https://en.wikipedia.org/wiki/", "A Wikipedia article: "),
    LinkRule("geonames", "https://www.geonames.org/", "A place on Geonames: "),
    LinkRule("nomisma", "http://nomisma.org/id/", "A Nomisma concept: "),
    LinkRule("tgn", "http://vocab.getty.edu/page/tgn/", "A place in the Getty TGN: "),
    LinkRule("loc", "https://id.loc.gov/authorities/names/", "A Library of Congress authority: "),
    LinkRule("viaf", "https://viaf.org/viaf/", "A VIAF record: "),
    LinkRule("trismegistos", "https://www.trismegistos.org/place/", "A place on Trismegistos: "),
)

HAR_LINKS = (
    LinkRule("pleiadesID", PLEIADES_PLACE_URL, "A place on Pleiades: "),
)


DATASETS: dict[str, DatasetConfig] = {
    "pleiades": DatasetConfig(
        key="pleiades",
        indexing=Indexing(
            name="Pleiades - AWMC on Peripleo",
            description="An enriched dataset of ancient places from the Pleiades gazetteer",
            license="https://creativecommons.org/licenses/by/3.0/",
            identifier="https://atlantides.org/downloads/pleiades/dumps/",
        ),
        base_url=PLEIADES_PLACE_URL,
        default_input=Path("csv/pleiades-places.csv"),
        default_output=Path("docs/data/pleiades.json"),
        feature_types_column="featureTypes",
        passthrough=(
            "authors", "hasConnectionsWith", "timePeriods",
            "locationPrecision", "minDate", "maxDate",
        ),
        annotations=(
            ("authors", "Authors"),
            ("timePeriods", "Time periods"),
            ("id", "Pleiades ID"),
        ),
        links=PLEIADES_LINKS,
    ),
    "heritage_at_risk": DatasetConfig(
        key="heritage_at_risk",
        indexing=Indexing(
            name="Heritage at Risk - Historic England on Peripleo",
            description="An enriched dataset of Heritage at Risk entries in England",
            license="https://www.nationalarchives.gov.uk/doc/open-government-licence/version/3/",
            identifier="https://historicengland.org.uk/advice/heritage-at-risk/search-register/",
        ),
        base_url="https://historicengland.org.uk/advice/heritage-at-risk/search-register/list-entry/",
        default_input=Path("csv/har-lp-ready-csv-enhanced.csv"),
        default_output=Path("docs/data/harLP.json"),
        passthrough=(
            "locationPrecision", "heritage_category", "site_sub_type",
        ),
        annotations=(
            ("heritage_category", "Heritage category"),
            ("site_sub_type", "Site type"),
            ("id", "List entry number"),
        ),
        links=HAR_LINKS,
    ),
}


# Short labels for license URLs, matched by prefix
LICENSES = (
    ("https://creativecommons.org/licenses/by-nc-sa", "CC BY-NC-SA"),
    ("https://creativecommons.org/licenses/by-nc-nd", "CC BY-NC-ND"),
    ("https://creativecommons.org/licenses/by-sa", "CC BY-SA"),
    ("https://creativecommons.org/licenses/by-nc", "CC BY-NC"),
    ("https://creativecommons.org/licenses/by-nd", "CC BY-ND"),
    ("https://creativecommons.org/licenses/by", "CC BY"),
    ("https://creativecommons.org/publicdomain/zero", "CC0"),
    ("https://www.nationalarchives.gov.uk/doc/open-government-licence/version/3/", "OGL"),
)


def format_license(url: str) -> str:
    """Return the short label for a known license URL, or the URL itself."""
    for prefix, label in LICENSES:
        if prefix in url:
            return label
    return url


def get_dataset(name: str) -> DatasetConfig:
    """Look up a dataset variant by key."""
    key = name.strip().lower()
    if key not in DATASETS:
        raise UnknownDatasetError(name, list(DATASETS))
    return DATASETS[key]
