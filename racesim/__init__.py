"""Racing simulation building blocks: cars, tracks, driving techniques and ranked reports."""

__version__ = "0.1.0"
__all__ = ["cars", "tracks", "techniques", "report", "example", "cli"]