"""
Common infrastructure for the coordinate transformer.

This package provides foundational components used across all modules:
- Reference constants with provenance
- Unit coercion at the API boundary
- Logging
"""

from coordinate_transformer.common.constants import Constant, PhysicalConstants
from coordinate_transformer.common.units import ureg, Q_, to_radians, to_meters
from coordinate_transformer.common.logging_config import get_logger, set_log_level

__all__ = [
    "Constant",
    "PhysicalConstants",
    "ureg",
    "Q_",
    "to_radians",
    "to_meters",
    "get_logger",
    "set_log_level",
]
