"""Pytest configuration file."""

import os
import sys

# Make podcast_feed_maker importable without installing the project
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
