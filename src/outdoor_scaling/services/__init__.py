"""Service layer exports."""

from .config_store import ScalingConfigStore
from .errors import FactoryError
from .inspection_service import InspectionService
from .outdoor_scaling_service import OutdoorScalingService

__all__ = [
    "FactoryError",
    "InspectionService",
    "OutdoorScalingService",
    "ScalingConfigStore",
]
