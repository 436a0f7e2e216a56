"""A tile-based collect-and-escape puzzle game played on .ber maps, with an XPM texture reader."""

__version__ = "0.1.0"

__all__ = ["__version__"]