"""Backend protocols for the collaborators behind the value type.

Defines interfaces for transliteration, HTML cleaning, email checking and
encryption so tests (or callers) can install alternative implementations
through :mod:`stringy.backends.registry`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class AsciiBackend(Protocol):
    """Protocol for ASCII folding and slug generation.

    Usage:
        ascii_backend: AsciiBackend = get_ascii_backend()
        ascii_backend.to_slugify("Hello Wörld", "-", "de")  # "hello-woerld"
    """

    def to_ascii(self, text: str, language: str = "en", remove_unsupported: bool = True) -> str:
        """Fold ``text`` to ASCII.

        Args:
            text: Text to fold.
            language: Language whose replacement table applies first.
            remove_unsupported: Drop characters with no ASCII equivalent.

        Returns:
            ASCII-only text (unless ``remove_unsupported`` is False).
        """
        ...

    def to_transliterate(self, text: str, unknown: str = "?", strict: bool = False) -> str:
        """Transliterate to ASCII, writing ``unknown`` for unmapped characters.

        Args:
            text: Text to transliterate.
            unknown: Replacement for characters without a mapping.
            strict: Use only explicit tables, no compatibility decomposition.

        Returns:
            Transliterated text.
        """
        ...

    def to_slugify(
        self,
        text: str,
        separator: str = "-",
        language: str = "en",
        replacements: Mapping[str, str] | None = None,
        replace_extra_symbols: bool = True,
        use_str_to_lower: bool = True,
        use_transliterate: bool = False,
    ) -> str:
        """Build a URL slug.

        Args:
            text: Text to convert.
            separator: Word separator.
            language: Language whose replacement table applies.
            replacements: Extra replacements applied before folding.
            replace_extra_symbols: Spell out symbols such as ``&`` or ``€``.
            use_str_to_lower: Lower-case the result.
            use_transliterate: Fall back to transliteration for unmapped text.

        Returns:
            The slug.
        """
        ...

    def normalize_msword(self, text: str) -> str:
        """Fold Windows-1252 smart punctuation to plain ASCII punctuation."""
        ...


@runtime_checkable
class HtmlSanitizer(Protocol):
    """Protocol for HTML tag stripping and XSS cleaning."""

    def strip_tags(self, text: str, allowable_tags: str = "") -> str:
        """Remove tags, keeping their text and any ``allowable_tags``."""
        ...

    def xss_clean(self, text: str) -> str:
        """Remove scripting vectors from ``text``."""
        ...

    def is_html(self, text: str) -> bool:
        """Whether ``text`` contains at least one HTML element."""
        ...


@runtime_checkable
class EmailChecker(Protocol):
    """Protocol for email address validation."""

    def is_valid(
        self,
        address: str,
        use_example_domain_check: bool = False,
        use_typo_in_domain_check: bool = False,
        use_temporary_domain_check: bool = False,
        use_dns_check: bool = False,
    ) -> bool:
        """Whether ``address`` is a valid email address.

        Args:
            address: Address to check.
            use_example_domain_check: Reject reserved example domains.
            use_typo_in_domain_check: Reject common provider misspellings.
            use_temporary_domain_check: Reject disposable mail providers.
            use_dns_check: Require a deliverable domain (blocking DNS lookup).

        Returns:
            True when every enabled check passes.
        """
        ...


@runtime_checkable
class Cipher(Protocol):
    """Protocol for password-based symmetric encryption."""

    def encrypt(self, plaintext: str, password: str) -> str:
        """Encrypt ``plaintext`` and return printable ciphertext."""
        ...

    def decrypt(self, ciphertext: str, password: str) -> str:
        """Decrypt ciphertext produced by :meth:`encrypt`.

        Raises:
            BackendError: If the password is wrong or the data was tampered with.
        """
        ...


@runtime_checkable
class PasswordHasher(Protocol):
    """Protocol for one-way password hashing."""

    def hash(self, password: str, rounds: int | None = None) -> str:
        """Hash ``password`` with a fresh salt."""
        ...

    def crypt(self, password: str, salt: str) -> str:
        """Hash ``password`` with an explicit salt."""
        ...
