"""A minimal real-time arcade shooter."""

__version__ = "0.1.0"
