"""
Feature gates backed by settings.
"""

from typing import Dict, Mapping, Optional

from lifecycle_hooks.domain.ports import IFeatureGatePort
from lifecycle_hooks.domain.services import LIFECYCLE_HANDLER_HTTPS

# Known gates and their defaults.
DEFAULT_FEATURE_GATES: Dict[str, bool] = {
    LIFECYCLE_HANDLER_HTTPS: True,
}

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def parse_feature_gates(value: str) -> Dict[str, bool]:
    """
    Parse a "Name=true,Other=false" string.

    Raises:
        ValueError: On malformed pairs or non-boolean values
    """
    gates: Dict[str, bool] = {}
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        name, sep, raw = item.partition("=")
        name, raw = name.strip(), raw.strip().lower()
        if not sep or not name:
            raise ValueError(f"missing bool value for feature gate {item!r}")
        if raw in _TRUE:
            gates[name] = True
        elif raw in _FALSE:
            gates[name] = False
        else:
            raise ValueError(f"invalid value of {name}={raw}, err: expected a boolean")
    return gates


class SettingsFeatureGate(IFeatureGatePort):
    """
    Immutable snapshot of feature gate values.

    Safe to share between concurrent hook runs: nothing mutates it after
    construction.
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, bool]] = None,
        known: Mapping[str, bool] = DEFAULT_FEATURE_GATES,
    ):
        """
        Initialize feature gate.

        Args:
            overrides: Values overriding the defaults
            known: Known gates and their defaults

        Raises:
            ValueError: If an override names an unknown gate
        """
        gates = dict(known)
        for name, value in (overrides or {}).items():
            if name not in gates:
                raise ValueError(f"unrecognized feature gate: {name}")
            gates[name] = bool(value)
        self._gates = gates

    @classmethod
    def from_string(cls, value: str) -> "SettingsFeatureGate":
        return cls(parse_feature_gates(value))

    def enabled(self, name: str) -> bool:
        """
        Check whether a feature gate is enabled.

        Raises:
            KeyError: If the gate is not known
        """
        if name not in self._gates:
            raise KeyError(f"feature {name!r} is not registered")
        return self._gates[name]
