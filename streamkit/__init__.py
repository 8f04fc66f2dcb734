"""Equality-aware array and linked lists, pull-style suppliers and one-shot streams."""

__version__ = "0.1.0"