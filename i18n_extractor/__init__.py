"""Extracts hard-coded text from HAML templates into a YAML translation catalog."""

__version__ = "0.1.0"
