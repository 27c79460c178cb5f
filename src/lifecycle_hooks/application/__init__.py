"""
Lifecycle Hooks Application Layer

Use cases built on the domain ports.
"""

from .services import HandlerRunner

__all__ = ["HandlerRunner"]
