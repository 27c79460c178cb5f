"""
Configuration Infrastructure

Settings and feature gates.
"""

from .settings import Settings, get_settings
from .feature_gate import SettingsFeatureGate, parse_feature_gates

__all__ = ["Settings", "get_settings", "SettingsFeatureGate", "parse_feature_gates"]
