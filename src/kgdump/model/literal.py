# kgdump/model/literal.py
"""
Classification and normalization of N-Triples object tokens.

Object tokens arrive exactly as they appear in the dump, e.g.

    <http://rdf.freebase.com/ns/m.02mjmr>    -> URI
    "Hanna Bieluszko"                         -> STRING
    "Hanna Bieluszko"@en                      -> TEXT
    1984                                      -> OTHER
"""
from __future__ import annotations

import string
from enum import Enum
from logging import getLogger
from typing import Optional

from rdflib.plugins.parsers.ntriples import unquote

from kgdump.common.types import Result
from kgdump.config import EmptyTokenPolicy, get_config

logger = getLogger(__name__)

LEGACY_ESCAPE_MARK = "$"
LEGACY_ESCAPE_WIDTH = 4


def join_surrogates(s: str) -> str:
    """Merge UTF-16 surrogate pairs decoded from separate escapes into one code point."""
    # unpaired surrogates pass through unchanged
    return s.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


class LiteralKind(Enum):
    URI = "uri"
    STRING = "string"
    TEXT = "text"
    OTHER = "other"


class MalformedTokenError(ValueError):
    """Raised for an object token too short to hold the literal form it starts."""

    def __init__(self, token: str):
        super().__init__(f"Malformed N-Triples object token: {token!r}")
        self.token = token


def _is_truncated(token: str) -> bool:
    if not token:
        return True
    return token[0] in '<"' and len(token) < 2


def classify(token: str, policy: Optional[EmptyTokenPolicy] = None) -> LiteralKind:
    """
    Determine the kind of an N-Triples object token from its first and last character.

    Empty tokens, and a lone `<` or `"`, are handled by `policy`
    (falls back to the configured `empty_token_policy`): REJECT raises
    MalformedTokenError, OTHER passes them through as OTHER.
    """
    if _is_truncated(token):
        policy = policy or get_config().empty_token_policy
        if policy == EmptyTokenPolicy.REJECT:
            raise MalformedTokenError(token)
        return LiteralKind.OTHER

    first = token[0]
    if first == "<":
        # e.g., <http://rdf.freebase.com/ns/m.02mjmr>
        return LiteralKind.URI
    if first == '"':
        if token[-1] == '"':
            # e.g., "Hanna Bieluszko"
            return LiteralKind.STRING
        # e.g., "Hanna Bieluszko"@en
        return LiteralKind.TEXT
    return LiteralKind.OTHER


def clean_uri(token: str) -> str:
    """Strip the angle brackets of a URI token and lower-case it; other input is returned as is."""
    if token.startswith("<"):
        return token[1:-1].lower()
    return token


def _parse_code_point(segment: str) -> Result:
    head = segment[:LEGACY_ESCAPE_WIDTH]
    if len(head) < LEGACY_ESCAPE_WIDTH:
        return Result.failure(f"escape group too short: {head!r}")
    if not all(c in string.hexdigits for c in head):
        return Result.failure(f"escape group is not hexadecimal: {head!r}")
    return Result.success(int(head, 16))


def unescape_legacy_key(s: str) -> str:
    """
    Undo MQL key escaping, where characters outside the key alphabet are written
    as `$` followed by four hex digits of their code point.

    For "Barack Obama" the dump holds the key "Barack_Hussein_Obama$002C_Jr$002E",
    which decodes to "Barack_Hussein_Obama,_Jr.".

    Groups that are too short or not hexadecimal are kept verbatim, `$` included.
    """
    first, *segments = s.split(LEGACY_ESCAPE_MARK)
    parts = [first]
    for segment in segments:
        parsed = _parse_code_point(segment)
        if parsed.ok:
            parts.append(chr(parsed.value))
            parts.append(segment[LEGACY_ESCAPE_WIDTH:])
        else:
            logger.debug(f"Keeping legacy escape verbatim in {s!r}: {parsed.error}")
            parts.append(LEGACY_ESCAPE_MARK + segment)
    return join_surrogates("".join(parts))


def normalize(token: str, policy: Optional[EmptyTokenPolicy] = None) -> str:
    """
    Turn a raw object token into its clean value.

    URI    -> bare lower-cased URI
    STRING -> content without the enclosing quotes, with MQL key escapes undone
    TEXT   -> token with N-Triples string escapes undone, quotes and @lang/^^type kept
    OTHER  -> token unchanged
    """
    kind = classify(token, policy)
    if kind is LiteralKind.URI:
        return clean_uri(token)
    if kind is LiteralKind.STRING:
        value = token[1:-1]
        if LEGACY_ESCAPE_MARK in value:
            value = unescape_legacy_key(value)
        return value
    if kind is LiteralKind.TEXT:
        return join_surrogates(unquote(token))
    return token
