"""A tile-based collect-and-escape puzzle game played on .ber maps, with an XPM image reader."""

__version__ = "0.1.0"