"""Language utilities for iseven-api.

This module centralizes the output languages supported by the CLI. Keeping
it in the domain layer lets the config, the CLI and the UI components share
a single source of truth without importing each other.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Supported natural-language choices for user-facing output."""

    ENGLISH = "en"
    SPANISH = "es"

    @classmethod
    def default(cls) -> "Language":
        """Return the default language used across the application."""

        return cls.ENGLISH

    def label(self) -> str:
        """Human readable label for diagnostics and logging."""

        return "Spanish" if self is Language.SPANISH else "English"

    def parity_sentence(self, subject: str, *, is_even: bool) -> str:
        """Sentence announcing the parity of `subject`."""

        if self is Language.SPANISH:
            return f"{subject} es un número {'par' if is_even else 'impar'}"
        return f"{subject} is an {'even' if is_even else 'odd'} number"

    def advertisement_label(self) -> str:
        return "Anuncio" if self is Language.SPANISH else "Advertisement"
