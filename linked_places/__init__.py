"""Linked Places transformer: tabular place records to a Peripleo-ready FeatureCollection."""

__version__ = "0.1.0"
