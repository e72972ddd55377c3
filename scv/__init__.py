"""SCV — a persistent registry of identified items."""

__version__ = "0.1.0"
