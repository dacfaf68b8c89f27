"""A tiny top-down billiard table simulation with a pygame window."""

__version__ = "0.1.0"