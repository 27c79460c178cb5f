"""
Feature Gate Port Interface

Read-only access to named boolean feature toggles.
"""

from abc import ABC, abstractmethod


class IFeatureGatePort(ABC):
    """Port interface for feature gate queries."""

    @abstractmethod
    def enabled(self, name: str) -> bool:
        """
        Check whether a feature gate is enabled.

        Args:
            name: Feature gate name

        Returns:
            True if enabled, False otherwise
        """
        pass
