"""
Token integrations.

Module-level functions take ``(payload, transport)``; ``CronosClient``
binds the transport so callers pass only the payload.
"""

from . import crc20, crc721

__all__ = ["crc20", "crc721"]
