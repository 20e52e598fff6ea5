"""
Application constants following kkb_fastapi pattern.
"""
from enum import Enum


class ConfigFile:
    """Configuration file paths."""
    PRODUCTION = "production.toml"
    DEVELOPMENT = "development.toml"
    TEST = "test.toml"


class Scope:
    """GHG Protocol Scope constants."""
    SCOPE_1 = "Scope 1"
    SCOPE_2 = "Scope 2"
    SCOPE_3 = "Scope 3"


class ScopeEnum(str, Enum):
    """GHG Protocol Scope enum, closed set of three."""
    SCOPE_1 = "Scope 1"  # Direct emissions
    SCOPE_2 = "Scope 2"  # Indirect emissions from purchased energy
    SCOPE_3 = "Scope 3"  # Value-chain emissions


class GHGTypeEnum(str, Enum):
    """Greenhouse gas kinds, normalized to CO2-equivalent tons."""
    CO2 = "CO₂"
    CH4 = "CH₄"
    N2O = "N₂O"


# Scope selector value meaning "no scope restriction"
ALL_SCOPES = "all"

SCOPE_FILTER_VALUES = (ALL_SCOPES,) + tuple(scope.value for scope in ScopeEnum)


class TrendDirectionEnum(str, Enum):
    """Direction of change between two reporting periods."""
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


class EmissionLevelEnum(str, Enum):
    """Map marker tier for a facility's total emissions."""
    CRITICAL = "critical"
    HIGH = "high"
    ELEVATED = "elevated"
    LOW = "low"


# Lower bounds (exclusive) in tonnes CO2e, checked from the top tier down
EMISSION_LEVEL_THRESHOLDS = (
    (EmissionLevelEnum.CRITICAL, 15000.0),
    (EmissionLevelEnum.HIGH, 8000.0),
    (EmissionLevelEnum.ELEVATED, 4000.0),
)

# Default display bounds (India) used when the config has no [map] section
DEFAULT_MAP_BOUNDS = {
    "min_lat": 8.0,
    "max_lat": 35.0,
    "min_lng": 68.0,
    "max_lng": 97.0,
}

DEFAULT_TOP_EMITTERS_LIMIT = 10
