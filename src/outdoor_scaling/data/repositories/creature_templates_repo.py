"""Creature templates repository."""
from __future__ import annotations

from typing import Dict

from outdoor_scaling.data.errors import DataValidationError
from outdoor_scaling.data.repositories.base import RepositoryBase
from outdoor_scaling.domain.defs import CreatureRank, CreatureTemplateDef
from outdoor_scaling.domain.unit_types import WeaponAttackType


class CreatureTemplatesRepository(RepositoryBase[CreatureTemplateDef]):
    """Loads creature templates keyed by entry."""

    def __init__(self, base_path=None) -> None:
        super().__init__("creature_templates.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CreatureTemplateDef]:
        templates: Dict[str, CreatureTemplateDef] = {}
        for raw_id, payload in raw.items():
            context = f"creature template '{raw_id}'"
            entry = self._require_numeric_key(raw_id, context)
            if entry == 0:
                raise DataValidationError(f"{context} entry must be non-zero.")
            data = self._require_mapping(payload, context)
            missing = {"name", "rank", "health"} - data.keys()
            if missing:
                raise DataValidationError(f"{context} missing fields: {sorted(missing)}")
            health = self._require_int(data["health"], f"{context} health")
            if health <= 0:
                raise DataValidationError(f"{context} health must be positive.")
            templates[str(entry)] = CreatureTemplateDef(
                entry=entry,
                name=self._require_str(data["name"], f"{context} name"),
                rank=self._parse_rank(data["rank"], context),
                health=health,
                damage=self._parse_damage(data.get("damage", {}), context),
            )
        return templates

    def get_template(self, entry: int) -> CreatureTemplateDef:
        return self.get(str(entry))

    def _parse_rank(self, value: object, context: str) -> CreatureRank:
        rank = self._require_str(value, f"{context} rank")
        try:
            return CreatureRank(rank)
        except ValueError as exc:
            raise DataValidationError(f"{context} has invalid rank '{rank}'.") from exc

    def _parse_damage(self, value: object, context: str) -> dict[WeaponAttackType, tuple[float, float]]:
        damage_map = self._require_mapping(value, f"{context} damage")
        damage: dict[WeaponAttackType, tuple[float, float]] = {}
        for slot, bounds in damage_map.items():
            try:
                attack_type = WeaponAttackType(slot)
            except ValueError as exc:
                raise DataValidationError(f"{context} damage has unknown slot '{slot}'.") from exc
            if not isinstance(bounds, list) or len(bounds) != 2:
                raise DataValidationError(f"{context} damage.{slot} must be a [min, max] pair.")
            low = self._require_number(bounds[0], f"{context} damage.{slot}[0]")
            high = self._require_number(bounds[1], f"{context} damage.{slot}[1]")
            if low < 0 or high < low:
                raise DataValidationError(f"{context} damage.{slot} must satisfy 0 <= min <= max.")
            damage[attack_type] = (low, high)
        return damage
