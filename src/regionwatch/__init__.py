"""regionwatch - country detection with a persistent region notification."""

__version__ = "0.1.0"
