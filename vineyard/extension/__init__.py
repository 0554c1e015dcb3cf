"""User configuration for remapping runs."""

from .settings import VineyardSettings

__all__ = ["VineyardSettings"]
