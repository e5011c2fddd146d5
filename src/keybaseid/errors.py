"""Exceptions raised by keybaseid."""

from __future__ import annotations

from typing import Optional


class KeybaseIdError(Exception):
    """Base class for keybaseid errors."""


class ConfigurationError(KeybaseIdError, TypeError):
    """Raised synchronously when a required option is missing or invalid."""

    def __init__(self, message: str, option: Optional[str] = None):
        self.option = option
        super().__init__(message)


class VerificationError(KeybaseIdError):
    """Raised when a signed message cannot be verified during authentication."""

    def __init__(self, message: str = "Could not verify user message.", username: Optional[str] = None):
        self.username = username
        super().__init__(message)
