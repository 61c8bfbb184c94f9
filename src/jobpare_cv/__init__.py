"""Generate CVs from JSON data and HTML templates."""

__version__ = "1.0.0"
