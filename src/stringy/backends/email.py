"""Email address checks.

Syntax validation goes through pydantic's ``validate_email`` (backed by
``email-validator``); the optional checks reject reserved example domains,
common provider misspellings, disposable providers and undeliverable
domains.
"""

from __future__ import annotations

import logging

import email_validator
from pydantic import validate_email

from stringy.core.errors import BackendError

logger = logging.getLogger(__name__)

EXAMPLE_DOMAINS = frozenset(
    {
        "example.com",
        "example.net",
        "example.org",
        "www.example.com",
        "www.example.net",
        "www.example.org",
        "test.com",
        "test.net",
        "test.org",
        "test.de",
        "localhost",
    }
)

TYPO_DOMAINS = frozenset(
    {
        "aol.co",
        "gamil.com",
        "gmai.com",
        "gmal.com",
        "gmial.com",
        "gmail.co",
        "gmail.cm",
        "gmaill.com",
        "gmx.dee",
        "googlemail.co",
        "hotmai.com",
        "hotmal.com",
        "hotmial.com",
        "hotmail.co",
        "hotmail.cm",
        "outlok.com",
        "outllok.com",
        "web.dee",
        "yaho.com",
        "yahooo.com",
        "yahoo.co",
        "yahoo.cm",
    }
)

TEMPORARY_DOMAINS = frozenset(
    {
        "10minutemail.com",
        "discard.email",
        "dispostable.com",
        "fakeinbox.com",
        "getnada.com",
        "guerrillamail.com",
        "mailinator.com",
        "maildrop.cc",
        "sharklasers.com",
        "temp-mail.org",
        "tempmail.com",
        "throwawaymail.com",
        "trashmail.com",
        "yopmail.com",
    }
)


class EmailBackend:
    """Email validation with optional domain policy checks."""

    def is_valid(
        self,
        address: str,
        use_example_domain_check: bool = False,
        use_typo_in_domain_check: bool = False,
        use_temporary_domain_check: bool = False,
        use_dns_check: bool = False,
    ) -> bool:
        if address == "" or "<" in address or address != address.strip():
            return False
        try:
            _, normalized = validate_email(address)
        except ValueError:
            return False

        domain = normalized.rsplit("@", 1)[1].lower()
        if use_example_domain_check and domain in EXAMPLE_DOMAINS:
            return False
        if use_typo_in_domain_check and domain in TYPO_DOMAINS:
            return False
        if use_temporary_domain_check and domain in TEMPORARY_DOMAINS:
            return False
        if use_dns_check:
            return self._is_deliverable(address)
        return True

    def _is_deliverable(self, address: str) -> bool:
        try:
            email_validator.validate_email(address, check_deliverability=True)
        except email_validator.EmailNotValidError as exc:
            logger.debug("Email %r is not deliverable: %s", address, exc)
            return False
        except Exception as exc:
            raise BackendError(f"DNS check for {address!r} failed: {exc}") from exc
        return True
