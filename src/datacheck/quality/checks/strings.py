"""String format checks: emails, URLs, UUIDs and predefined formats.

Non-string values never match a format.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any
from urllib.parse import urlsplit

from datacheck.core.values import indexed_non_null
from datacheck.expectations.models import MatchesFormat, ValidEmails, ValidUrls, ValidUuids
from datacheck.quality.checks.base import CheckContext, column_not_found
from datacheck.quality.models import ExpectationResult

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)

FORMAT_PATTERNS: dict[str, tuple[re.Pattern[str], str]] = {
    "us_phone": (re.compile(r"^(?:\(\d{3}\)\s?|\d{3}[-\s]?)?\d{3}[-\s]?\d{4}$"), "US phone"),
    "iso_date": (re.compile(r"^\d{4}-\d{2}-\d{2}$"), "ISO date (YYYY-MM-DD)"),
    "iso_datetime": (
        re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:Z|[+-]\d{2}:\d{2})?$"),
        "ISO datetime",
    ),
    "ip_address": (
        re.compile(
            r"^(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
            r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$"
        ),
        "IPv4 address",
    ),
    "hex_color": (re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$"), "hex color (#RGB or #RRGGBB)"),
}


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None


def is_valid_url(value: Any, schemes: tuple[str, ...], require_tld: bool = True) -> bool:
    if not isinstance(value, str):
        return False
    try:
        parts = urlsplit(value)
        host = parts.hostname
    except ValueError:
        return False
    if not parts.scheme or not host:
        return False
    if parts.scheme.lower() not in schemes:
        return False
    return "." in host if require_tld else True


def is_valid_uuid(value: Any, version: int | None = None) -> bool:
    if not isinstance(value, str) or UUID_PATTERN.match(value) is None:
        return False
    if version is None:
        return True
    # xxxxxxxx-xxxx-Vxxx-xxxx-xxxxxxxxxxxx
    return int(value.split("-")[2][0], 16) == version


def _check_each(
    expectation: Any,
    ctx: CheckContext,
    predicate: Callable[[Any], bool],
    **extra: Any,
) -> ExpectationResult:
    if not ctx.has_column(expectation.column):
        return column_not_found(expectation, ctx, expectation.column)

    present = indexed_non_null(ctx.values(expectation.column))
    invalid = [(i, v) for i, v in present if not predicate(v)]
    return ExpectationResult.of(
        expectation,
        not invalid,
        checked_count=len(present),
        valid_count=len(present) - len(invalid),
        invalid_count=len(invalid),
        invalid_indices=ctx.examples([i for i, _ in invalid]),
        invalid_examples=ctx.examples([v for _, v in invalid]),
        **extra,
    )


def check_valid_emails(expectation: ValidEmails, ctx: CheckContext) -> ExpectationResult:
    return _check_each(expectation, ctx, is_valid_email)


def check_valid_urls(expectation: ValidUrls, ctx: CheckContext) -> ExpectationResult:
    return _check_each(
        expectation,
        ctx,
        lambda v: is_valid_url(v, expectation.schemes, expectation.require_tld),
        allowed_schemes=list(expectation.schemes),
    )


def check_valid_uuids(expectation: ValidUuids, ctx: CheckContext) -> ExpectationResult:
    return _check_each(
        expectation,
        ctx,
        lambda v: is_valid_uuid(v, expectation.version),
        version=expectation.version,
    )


def check_matches_format(expectation: MatchesFormat, ctx: CheckContext) -> ExpectationResult:
    pattern, label = FORMAT_PATTERNS[expectation.format]
    return _check_each(
        expectation,
        ctx,
        lambda v: isinstance(v, str) and pattern.match(v) is not None,
        format=label,
    )
