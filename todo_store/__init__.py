"""In-process todo store behind a swappable repository contract."""

__version__ = "1.0.0"
