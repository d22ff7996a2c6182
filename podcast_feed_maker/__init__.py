"""Podcast Feed Maker - turn a JSON list of episodes into an iTunes podcast RSS feed."""

__version__ = "0.1.0"
