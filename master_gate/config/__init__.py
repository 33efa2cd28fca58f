"""Configuration module for Master Gate.

Available Configurations:
- MasterGateConfig: quorum threshold, vote set bound, environment
"""

from master_gate.config.master_config import (
    DEFAULT_MASTER_CONFIG,
    TEST_MASTER_CONFIG,
    MasterGateConfig,
)

__all__ = [
    "DEFAULT_MASTER_CONFIG",
    "TEST_MASTER_CONFIG",
    "MasterGateConfig",
]
