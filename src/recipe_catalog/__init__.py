"""Recipe catalog: nutrition aggregation over a live recipe/ingredient catalog."""

__version__ = "0.1.0"
