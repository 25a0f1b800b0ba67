"""Account extraction from registry diagnostic text.

The primary source has no stable layout across OS builds, so it is parsed in
two ordered tiers: an anchored one-account-per-line grammar first, then a
loose inline grammar that only runs when the strict tier finds nothing. The
tiers are never merged. The legacy source gets its own single grammar and
never carries a reported count.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from core.domain.models import ParsedAccounts, RawDiagnostic, is_principal_shaped
from core.domain.source_kind import SourceKind

logger = logging.getLogger(__name__)

_REPORTED_COUNT_RE = re.compile(r"Accounts\s+found\s*:\s*(\d+)", re.IGNORECASE)
_STRICT_USER_RE = re.compile(r"^\s*(?:user|username)\s*:\s*([^,\r\n]*)", re.IGNORECASE)
_LOOSE_USER_RE = re.compile(r"user\s*:\s*([^\s,;]+@[^\s,;]+)", re.IGNORECASE)
_LEGACY_USER_RE = re.compile(
    r"^\s*(?:User|UserName|User Email|UPN)\s*:\s*([^\s@]+@\S+)\s*$",
    re.IGNORECASE,
)


def _append_unique(accounts: list[str], candidates: Iterable[str]) -> None:
    for candidate in candidates:
        if candidate and is_principal_shaped(candidate) and candidate not in accounts:
            accounts.append(candidate)


def extract_reported_count(text: str) -> int:
    """First `Accounts found : N` line wins; 0 when absent."""

    for line in text.splitlines():
        match = _REPORTED_COUNT_RE.search(line)
        if match:
            return int(match.group(1))
    return 0


def parse_strict(text: str) -> list[str]:
    accounts: list[str] = []
    candidates = (
        match.group(1).strip()
        for match in map(_STRICT_USER_RE.match, text.splitlines())
        if match
    )
    _append_unique(accounts, candidates)
    return accounts


def parse_loose(text: str) -> list[str]:
    accounts: list[str] = []
    candidates = (match.group(1).rstrip(".") for match in _LOOSE_USER_RE.finditer(text))
    _append_unique(accounts, candidates)
    return accounts


def parse_legacy(text: str) -> list[str]:
    accounts: list[str] = []
    candidates = (
        match.group(1)
        for match in map(_LEGACY_USER_RE.match, text.splitlines())
        if match
    )
    _append_unique(accounts, candidates)
    return accounts


def parse(raw: RawDiagnostic | str, source_kind: SourceKind | None = None) -> ParsedAccounts:
    """Turn raw diagnostic text into a deduplicated account list and count.

    `source_kind` defaults to the tag carried by `raw`, or to the primary
    grammar for a plain string. `SourceKind.NONE` applies no grammar.
    """

    if isinstance(raw, RawDiagnostic):
        text = raw.text
        kind = source_kind or raw.kind
    else:
        text = raw
        kind = source_kind or SourceKind.PRIMARY

    if not text.strip():
        return ParsedAccounts(raw_was_empty=True)
    if kind is SourceKind.NONE:
        return ParsedAccounts()

    if kind is SourceKind.SECONDARY:
        accounts = parse_legacy(text)
        logger.debug("Legacy grammar parsed %d account(s)", len(accounts))
        return ParsedAccounts(accounts=tuple(accounts))

    reported_count = extract_reported_count(text)
    accounts = parse_strict(text)
    if not accounts:
        accounts = parse_loose(text)
        logger.debug("Strict grammar found nothing; inline grammar parsed %d account(s)", len(accounts))
    else:
        logger.debug("Strict grammar parsed %d account(s)", len(accounts))

    return ParsedAccounts(accounts=tuple(accounts), reported_count=reported_count)
