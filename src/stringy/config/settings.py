"""Configuration settings using Pydantic Settings.

Provides typed library defaults with environment variable support.

Usage:
    from stringy.config import StringySettings, configure, get_settings

    # Load from environment variables (STRINGY_*)
    settings = get_settings()

    # Or override with explicit values
    configure(default_language="de", bcrypt_rounds=10)
"""

from __future__ import annotations

import threading

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for the config module. "
        "Install with: pip install pydantic-settings"
    ) from e


class StringySettings(BaseSettings):  # type: ignore[misc]
    """Library-wide defaults.

    Attributes:
        default_encoding: Encoding tag used when a value is created without one.
        default_language: Language code for transliteration and slugs.
        cipher_iterations: PBKDF2 rounds used to derive encryption keys.
        bcrypt_rounds: Default bcrypt cost factor.
        random_alphabet: Characters used by append_random_string().
        password_alphabet: Easily readable characters used by append_password().

    Environment Variables:
        STRINGY_DEFAULT_ENCODING
        STRINGY_DEFAULT_LANGUAGE
        STRINGY_CIPHER_ITERATIONS
        STRINGY_BCRYPT_ROUNDS
        STRINGY_RANDOM_ALPHABET
        STRINGY_PASSWORD_ALPHABET
    """

    model_config = SettingsConfigDict(
        env_prefix="STRINGY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_encoding: str = "UTF-8"
    default_language: str = "en"
    cipher_iterations: int = 390_000
    bcrypt_rounds: int = 12
    random_alphabet: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    password_alphabet: str = "2346789bcdfghjkmnpqrtvwxyzBCDFGHJKLMNPQRTVWXYZ!?_#"


_settings: StringySettings | None = None
_lock = threading.Lock()


def get_settings() -> StringySettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        with _lock:
            if _settings is None:
                _settings = StringySettings()
    return _settings


def configure(**overrides: object) -> StringySettings:
    """Replace the process-wide settings and drop cached backends.

    Backends built from the old settings (cipher iterations, bcrypt rounds)
    are rebuilt on next use; backends set with ``install`` are dropped too.

    Args:
        **overrides: Field values taking precedence over the environment.

    Returns:
        The new settings instance.
    """
    global _settings
    with _lock:
        _settings = StringySettings(**overrides)  # type: ignore[arg-type]

    # Import at runtime to avoid circular dependency
    from stringy.backends.registry import reset_backends

    reset_backends()
    return _settings
