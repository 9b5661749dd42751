"""Exceptions raised by the VaultChain application."""

from __future__ import annotations


class VaultChainError(Exception):
    """Raised when the application itself fails (not a step's own error)."""
