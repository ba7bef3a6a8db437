"""Exceptions raised by the agent scaffolder.

Library code raises these; only the CLI entry point turns them into console
messages and exit codes.  Filesystem failures are not wrapped and surface as
the builtin ``OSError``.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for scaffolding failures the caller can correct."""


class UsageError(ScaffoldError):
    """Raised when a required input (the project name) is missing."""


class UnknownCategoryError(ScaffoldError):
    """Raised when an explicitly requested template category does not exist."""

    def __init__(self, category: str, available: list[str]) -> None:
        self.category = category
        self.available = list(available)
        super().__init__(f"Unknown type: {category}")
