"""
kgdump - normalization of N-Triples knowledge-graph dump literals and
per-subject node records.
"""

from .config import EmptyTokenPolicy, KgDumpConfig, get_config, load_config, set_config
from .model import (
    LiteralKind, MalformedTokenError, Node, classify, clean_uri, normalize, unescape_legacy_key
)

__all__ = [
    "EmptyTokenPolicy", "KgDumpConfig", "get_config", "load_config", "set_config",
    "LiteralKind", "MalformedTokenError", "Node", "classify", "clean_uri", "normalize",
    "unescape_legacy_key",
]
