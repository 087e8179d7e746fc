"""Parser for zone and creature override strings.

Overrides are written as comma separated entries of whitespace separated
tokens, ``"id health [damage]"``::

    "12 1.5 1.2, 440 2.0"

Parsing is tolerant: a malformed entry is skipped on its own and never
invalidates the rest of the string, so a typo in one override cannot stop a
server from loading its configuration.
"""
from __future__ import annotations

import logging
import math
from typing import Dict

from outdoor_scaling.domain.scaling_models import ScalingOverride

logger = logging.getLogger(__name__)

MAX_OVERRIDE_ID = 0xFFFFFFFF


def parse_override_string(spec: str) -> Dict[int, ScalingOverride]:
    """Return ``{id: ScalingOverride}`` for every valid entry in ``spec``.

    Rules:
    - an entry without an id or a health token is skipped;
    - a missing damage token reuses the health multiplier;
    - any token that is not a number skips the whole entry;
    - non-positive multipliers skip the entry;
    - later entries for the same id replace earlier ones.
    """
    overrides: Dict[int, ScalingOverride] = {}
    if not spec:
        return overrides
    for chunk in spec.split(","):
        tokens = chunk.split()
        if len(tokens) < 2:
            if tokens:
                logger.debug("Skipping override entry without a health value: %r", chunk)
            continue
        id_token, health_token = tokens[0], tokens[1]
        damage_token = tokens[2] if len(tokens) > 2 else None

        override_id = _parse_id(id_token)
        health = _parse_multiplier(health_token)
        damage = health if damage_token is None else _parse_multiplier(damage_token)
        if override_id is None or health is None or damage is None:
            logger.debug("Skipping unparsable override entry: %r", chunk)
            continue
        if health <= 0.0 or damage <= 0.0:
            logger.debug("Skipping override entry with non-positive multiplier: %r", chunk)
            continue
        overrides[override_id] = ScalingOverride(health=health, damage=damage)
    return overrides


def _parse_id(token: str) -> int | None:
    if not token.isascii() or not token.isdigit():
        return None
    value = int(token)
    if value > MAX_OVERRIDE_ID:
        return None
    return value


def _parse_multiplier(token: str) -> float | None:
    # float() would read "1_5" as 15.0.
    if "_" in token:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value
