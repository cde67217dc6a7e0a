"""Terminal weather forecast client for the Open-Meteo API, with a local SQLite user store."""

__version__ = "0.1.0"
__all__ = ["__version__"]