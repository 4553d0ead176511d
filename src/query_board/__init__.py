"""Query Board: queries with likes and comments over a REST API."""

__version__ = "0.1.0"
