"""
Domain Ports

Port interfaces defining contracts between layers.
All dependencies on external systems are abstracted through ports.
"""

from .command_runner_port import ICommandRunnerPort, CommandRunnerError
from .http_doer_port import IHTTPDoerPort, HTTPDoerError, HTTPResponseToHTTPSClientError
from .feature_gate_port import IFeatureGatePort

__all__ = [
    # Command runner
    "ICommandRunnerPort",
    "CommandRunnerError",
    # HTTP doer
    "IHTTPDoerPort",
    "HTTPDoerError",
    "HTTPResponseToHTTPSClientError",
    # Feature gate
    "IFeatureGatePort",
]
