"""Typed HTTP headers: decode header values into objects and encode them back."""

__version__ = "0.3.8"