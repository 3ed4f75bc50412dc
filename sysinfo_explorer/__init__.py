"""Windows hardware inventory and live system statistics."""

__version__ = "1.0.0"
