"""Repository for the world-wide creature base rates."""
from __future__ import annotations

from typing import Dict

from outdoor_scaling.data.errors import DataValidationError
from outdoor_scaling.data.repositories.base import RepositoryBase
from outdoor_scaling.domain.stat_applier import BaseRates
from outdoor_scaling.domain.unit_types import CreatureRank

_RATE_FIELDS = ("health", "damage", "spell_damage")


class WorldRatesRepository(RepositoryBase[BaseRates]):
    """Loads per-rank health, damage and spell damage rates from ``world_rates.json``."""

    def __init__(self, base_path=None) -> None:
        super().__init__("world_rates.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, BaseRates]:
        known_ranks = {rank.value for rank in CreatureRank}
        rates: Dict[str, BaseRates] = {}
        for rank_key, payload in raw.items():
            if rank_key not in known_ranks:
                raise DataValidationError(
                    f"world_rates has unknown rank '{rank_key}' (expected one of {sorted(known_ranks)})."
                )
            mapping = self._require_mapping(payload, f"world_rates.{rank_key}")
            extra = set(mapping) - set(_RATE_FIELDS)
            if extra:
                raise DataValidationError(f"world_rates.{rank_key} has unknown fields: {sorted(extra)}")
            values = {
                field: self._require_number(mapping.get(field, 1.0), f"world_rates.{rank_key}.{field}")
                for field in _RATE_FIELDS
            }
            rates[rank_key] = BaseRates(**values)
        for rank_key in known_ranks - rates.keys():
            rates[rank_key] = BaseRates()
        return rates

    def rates_for_rank(self, rank: CreatureRank | None) -> BaseRates:
        """Return the rates row for ``rank``; unknown ranks use the elite row."""
        if rank is None:
            rank = CreatureRank.ELITE
        return self.get(rank.value)
