"""Terminal browser for the Star Wars film catalog API."""

__version__ = "0.1.0"
