"""
Application Services

Services orchestrating domain objects and ports.
"""

from .handler_runner import HandlerRunner

__all__ = ["HandlerRunner"]
