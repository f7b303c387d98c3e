from .literal import (
    LiteralKind, MalformedTokenError, classify, clean_uri, normalize, unescape_legacy_key
)
from .node import Node

__all__ = [
    "LiteralKind", "MalformedTokenError", "classify", "clean_uri", "normalize",
    "unescape_legacy_key", "Node",
]
