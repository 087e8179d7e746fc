"""Factory helpers for runtime entities."""

from .creature_factory import create_creature_instance

__all__ = ["create_creature_instance"]
