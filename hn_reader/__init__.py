"""Minimal Hacker News top-stories reader."""

__version__ = "0.1.0"
