"""
HTTP Infrastructure

httpx-based transport for HTTPGet hooks.
"""

from .httpx_doer import HttpxDoer, is_plaintext_reply_error

__all__ = ["HttpxDoer", "is_plaintext_reply_error"]
