"""Errors raised by the Linked Places transformer."""

from pathlib import Path


class TransformError(Exception):
    """Base class for fatal transformation failures."""
    pass


class InputReadError(TransformError):
    """Raised when the input CSV cannot be opened or decoded."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        super().__init__(f"Cannot read input file {self.path}: {reason}")


class CsvParseError(TransformError):
    """Raised when no header row can be identified in the input."""

    def __init__(self, path: Path | None, reason: str):
        self.path = Path(path) if path else None
        where = str(self.path) if self.path else "<memory>"
        super().__init__(f"Cannot parse CSV {where}: {reason}")


class OutputWriteError(TransformError):
    """Raised when the output document cannot be written."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        super().__init__(f"Cannot write output file {self.path}: {reason}")


class UnknownDatasetError(TransformError):
    """Raised for a dataset name missing from the registry."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        super().__init__(f"Unknown dataset '{name}' (known: {', '.join(known)})")
