"""Backends behind the value type.

Usage:
    from stringy.backends import get_unicode_backend, install

    get_unicode_backend().str_camelize("hello world")  # "helloWorld"
    install("email", MyEmailChecker())
"""

from stringy.backends.protocol import (
    AsciiBackend,
    Cipher,
    EmailChecker,
    HtmlSanitizer,
    PasswordHasher,
)
from stringy.backends.registry import (
    BackendRegistry,
    get_ascii_backend,
    get_cipher,
    get_email_backend,
    get_html_backend,
    get_password_hasher,
    get_unicode_backend,
    install,
    reset_backends,
)

__all__ = [
    # Protocols
    "AsciiBackend",
    "HtmlSanitizer",
    "EmailChecker",
    "Cipher",
    "PasswordHasher",
    # Registry
    "BackendRegistry",
    "get_unicode_backend",
    "get_ascii_backend",
    "get_html_backend",
    "get_email_backend",
    "get_cipher",
    "get_password_hasher",
    "install",
    "reset_backends",
]
