"""Holder for the live outdoor scaling configuration."""
from __future__ import annotations

import logging
import threading

from outdoor_scaling.data.errors import DataError
from outdoor_scaling.data.repositories import ScalingConfigRepository
from outdoor_scaling.domain.scaling_models import OutdoorScalingConfig

logger = logging.getLogger(__name__)


class ScalingConfigStore:
    """Publishes one immutable OutdoorScalingConfig at a time.

    Readers call ``snapshot()`` once per operation and work with that object;
    a reload builds a complete replacement first and then swaps the reference,
    so no reader ever sees a half-built table.
    """

    def __init__(
        self,
        config_repo: ScalingConfigRepository,
        initial: OutdoorScalingConfig | None = None,
    ) -> None:
        self._config_repo = config_repo
        self._lock = threading.Lock()
        self._current = initial if initial is not None else OutdoorScalingConfig()

    def snapshot(self) -> OutdoorScalingConfig:
        return self._current

    def replace(self, config: OutdoorScalingConfig) -> None:
        with self._lock:
            self._current = config

    def load(self, *, reload: bool = False) -> bool:
        """Read the configuration file and publish it; returns False if it could not be read."""
        if reload:
            self._config_repo.reload()
        try:
            config = self._config_repo.get_config()
        except DataError as exc:
            logger.error("Outdoor scaling config %s failed, keeping previous values: %s",
                         "reload" if reload else "load", exc)
            return False
        self.replace(config)
        logger.info(
            "Outdoor scaling %s: enabled=%s, %d zone override(s), %d creature override(s)",
            "reloaded" if reload else "loaded",
            config.enabled,
            len(config.zone_overrides),
            len(config.creature_overrides),
        )
        return True
