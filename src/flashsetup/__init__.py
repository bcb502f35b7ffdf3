"""Rename and set up a React Native Flash boilerplate project."""

__version__ = "0.1.0"
