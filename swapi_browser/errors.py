"""Exceptions raised by the browser."""
from __future__ import annotations


class SwapiBrowserError(Exception):
    """Base class for every error the browser surfaces to the user."""


class FetchError(SwapiBrowserError):
    """A GET for one locator failed (transport error or non-2xx status)."""

    def __init__(self, locator: str, cause: Exception):
        self.locator = locator
        self.cause = cause
        super().__init__(f"GET {locator} failed: {cause}")
