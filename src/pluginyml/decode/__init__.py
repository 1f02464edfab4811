# topmark:header:start
#
#   project      : PluginYml
#   file         : __init__.py
#   file_relpath : src/pluginyml/decode/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Schema-driven decoder and its value coercion helpers."""

from __future__ import annotations

from pluginyml.decode.coercion import (
    FALSE_TOKENS,
    TRUE_TOKENS,
    coerce_boolean,
    coerce_enum,
    coerce_scalar,
    coerce_string_list,
    fold_block_scalar,
    parse_boolean_token,
    scalar_text,
)
from pluginyml.decode.decoder import DecodeResult, decode

__all__ = [
    "FALSE_TOKENS",
    "TRUE_TOKENS",
    "DecodeResult",
    "coerce_boolean",
    "coerce_enum",
    "coerce_scalar",
    "coerce_string_list",
    "decode",
    "fold_block_scalar",
    "parse_boolean_token",
    "scalar_text",
]
