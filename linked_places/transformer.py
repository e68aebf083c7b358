"""
The batch transform: CSV rows in, one FeatureCollection document out.

Rows are transformed independently. A row that fails the locatedness gate
or lacks a coordinate is dropped; a row whose data cannot be converted is logged, counted as
failed and skipped. Neither affects its siblings.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable

from loguru import logger

from linked_places.config import DatasetConfig, get_dataset, settings
from linked_places.exceptions import TransformError
from linked_places.features import build_feature, drop_reason
from linked_places.utils.io import atomic_write_json, read_csv_records


@dataclass
class TransformResult:
    """Statistics of a transform run."""
    dataset: str
    success: bool = False
    records_read: int = 0
    features_built: int = 0
    records_dropped: int = 0
    records_failed: int = 0
    errors: list[str] = field(default_factory=list)
    output_path: Path | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None

    @property
    def duration_seconds(self) -> float | None:
        """Calculate duration in seconds."""
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return None


def transform_records(
    rows: Iterable[dict],
    dataset: DatasetConfig,
    result: TransformResult | None = None,
) -> list[dict[str, Any]]:
    """
    Turn CSV rows into features, preserving row order.

    Args:
        rows: Parsed CSV rows
        dataset: Dataset variant the rows belong to
        result: Optional statistics accumulator

    Returns:
        Features for the rows that passed the gate
    """
    result = result or TransformResult(dataset=dataset.key)
    features = []

    for index, row in enumerate(rows, start=1):
        result.records_read += 1
        record_id = (row.get(dataset.id_column) or "").strip() or f"row {index}"

        try:
            feature = build_feature(row, dataset)
        except (ValueError, TypeError, KeyError) as e:
            result.records_failed += 1
            result.errors.append(f"{record_id}: {e}")
            logger.warning(f"Skipping {record_id}: {e}")
            continue

        if feature is None:
            result.records_dropped += 1
            logger.debug(f"Dropped {record_id}: {drop_reason(row, dataset)}")
            continue

        features.append(feature)
        result.features_built += 1

    return features


def build_feature_collection(features: list[dict], dataset: DatasetConfig) -> dict[str, Any]:
    """Wrap features with the dataset's indexing metadata."""
    return {
        "type": "FeatureCollection",
        "indexing": dataset.indexing.to_dict(),
        "features": features,
    }


def run_transform(
    dataset_name: str | None = None,
    input_path: Path | None = None,
    output_path: Path | None = None,
    indent: int | None = None,
) -> TransformResult:
    """
    Run one full pass: read the CSV, transform every row, write the document.

    Paths default to the settings overrides, then to the dataset's fixed
    paths.

    Raises:
        TransformError: Unknown dataset, unreadable input or unwritable output
    """
    dataset = get_dataset(dataset_name or settings.dataset)
    input_path = Path(input_path or settings.input_path or dataset.default_input)
    output_path = Path(output_path or settings.output_path or dataset.default_output)
    indent = settings.json_indent if indent is None else indent

    result = TransformResult(dataset=dataset.key, started_at=datetime.now())

    try:
        logger.info(f"Transforming {dataset.indexing.name} from {input_path}")
        rows = read_csv_records(input_path)

        features = transform_records(rows, dataset, result)
        document = build_feature_collection(features, dataset)

        result.output_path = atomic_write_json(output_path, document, indent=indent)
        result.success = True
        logger.info(f"Wrote {result.features_built:,} features to {output_path}")

    except TransformError as e:
        result.completed_at = datetime.now()
        result.errors.append(str(e))
        logger.error(f"Transform failed after {result.duration_seconds:.1f}s: {e}")
        raise

    result.completed_at = datetime.now()
    logger.info(
        f"Transform complete: {result.features_built} features, "
        f"{result.records_dropped} dropped, "
        f"{result.records_failed} failed, "
        f"{result.duration_seconds:.1f}s"
    )

    return result
