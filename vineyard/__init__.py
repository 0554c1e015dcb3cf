"""Vineyard: configuration and execution settings for remapping runs."""

__version__ = "0.1.0"
