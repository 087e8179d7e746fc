"""Maps repository."""
from __future__ import annotations

from typing import Dict

from outdoor_scaling.data.errors import DataValidationError
from outdoor_scaling.data.repositories.base import RepositoryBase
from outdoor_scaling.domain.defs import MapDef


class MapsRepository(RepositoryBase[MapDef]):
    """Loads and validates map definitions keyed by map id."""

    def __init__(self, base_path=None) -> None:
        super().__init__("maps.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, MapDef]:
        maps: Dict[str, MapDef] = {}
        for raw_id, payload in raw.items():
            map_id = self._require_numeric_key(raw_id, f"map id '{raw_id}'")
            map_data = self._require_mapping(payload, f"map '{raw_id}'")
            missing = {"name", "continent", "instanceable", "expansion"} - map_data.keys()
            if missing:
                raise DataValidationError(f"map '{raw_id}' missing fields: {sorted(missing)}")
            expansion = self._require_int(map_data["expansion"], f"map '{raw_id}' expansion")
            if expansion < 0:
                raise DataValidationError(f"map '{raw_id}' expansion must be >= 0.")
            maps[str(map_id)] = MapDef(
                id=map_id,
                name=self._require_str(map_data["name"], f"map '{raw_id}' name"),
                is_continent=self._require_bool(map_data["continent"], f"map '{raw_id}' continent"),
                instanceable=self._require_bool(map_data["instanceable"], f"map '{raw_id}' instanceable"),
                expansion=expansion,
            )
        return maps

    def get_map(self, map_id: int) -> MapDef:
        return self.get(str(map_id))
