"""Static-analysis tools for local Java source trees."""

__version__ = "1.0.0"
