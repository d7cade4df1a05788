"""Process-wide backend singletons.

Each backend is created on first use behind a double-checked lock and is
read-only afterwards. ``install`` swaps in an alternative implementation
(any object satisfying the matching protocol); ``reset_backends`` drops all
instances so the next call rebuilds them from the current settings.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from stringy.backends.ascii import AsciiBackend
from stringy.backends.cipher import BcryptHasher, FernetCipher
from stringy.backends.email import EmailBackend
from stringy.backends.html import HtmlBackend
from stringy.backends.protocol import Cipher, EmailChecker, HtmlSanitizer, PasswordHasher
from stringy.backends.protocol import AsciiBackend as AsciiBackendProtocol
from stringy.backends.unicode import UnicodeBackend
from stringy.config import get_settings

logger = logging.getLogger(__name__)


def _factories() -> dict[str, Callable[[], Any]]:
    return {
        "unicode": UnicodeBackend,
        "ascii": AsciiBackend,
        "html": HtmlBackend,
        "email": EmailBackend,
        "cipher": lambda: FernetCipher(iterations=get_settings().cipher_iterations),
        "hasher": lambda: BcryptHasher(rounds=get_settings().bcrypt_rounds),
    }


class BackendRegistry:
    """Lazily created backend instances. Singleton per process."""

    _instances: dict[str, Any] = {}
    _lock = threading.Lock()

    @classmethod
    def get(cls, name: str) -> Any:
        """Get the backend registered under ``name``, creating it if necessary."""
        instance = cls._instances.get(name)
        if instance is None:
            with cls._lock:
                instance = cls._instances.get(name)
                if instance is None:
                    factory = _factories().get(name)
                    if factory is None:
                        raise KeyError(f"Unknown backend: {name}")
                    instance = factory()
                    cls._instances[name] = instance
                    logger.debug("Initialized %s backend: %s", name, type(instance).__name__)
        return instance

    @classmethod
    def install(cls, name: str, instance: Any) -> None:
        """Use ``instance`` for ``name`` from now on."""
        if name not in _factories():
            raise KeyError(f"Unknown backend: {name}")
        with cls._lock:
            cls._instances[name] = instance

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._instances.clear()


def get_unicode_backend() -> UnicodeBackend:
    return BackendRegistry.get("unicode")


def get_ascii_backend() -> AsciiBackendProtocol:
    return BackendRegistry.get("ascii")


def get_html_backend() -> HtmlSanitizer:
    return BackendRegistry.get("html")


def get_email_backend() -> EmailChecker:
    return BackendRegistry.get("email")


def get_cipher() -> Cipher:
    return BackendRegistry.get("cipher")


def get_password_hasher() -> PasswordHasher:
    return BackendRegistry.get("hasher")


def install(name: str, instance: Any) -> None:
    BackendRegistry.install(name, instance)


def reset_backends() -> None:
    """Drop every backend instance (used by tests)."""
    BackendRegistry.reset()
