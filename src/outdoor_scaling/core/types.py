"""Shared type aliases for the core and domain layers."""

MapId = int
ZoneId = int
CreatureEntry = int
CreatureGuid = int

__all__ = ["CreatureEntry", "CreatureGuid", "MapId", "ZoneId"]
