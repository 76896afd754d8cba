"""RFC 5424 STRUCTURED-DATA serialisation.

Purpose
-------
Render a mapping of SD-ID to parameters into the bracketed
``[id name="value"]`` grammar from RFC 5424 section 6.3.

Contents
--------
* :data:`NILVALUE` - the RFC 5424 placeholder for absent fields.
* :data:`StructuredData` - type alias for the nested mapping.
* :func:`escape_param_value` - backslash escaping for ``"``, ``\\`` and ``]``.
* :func:`encode_structured_data` - serialiser used by the RFC 5424 formatter.

System Role
-----------
Pure domain helper; values are inserted verbatim unless the caller opts into
strict escaping, because downstream collectors may depend on the literal form.
"""

from __future__ import annotations

from typing import Mapping

NILVALUE = "-"
"""Value emitted when an RFC 5424 header field or SD block is absent."""

StructuredData = Mapping[str, Mapping[str, str]]

_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "]": "\\]"})


def escape_param_value(value: str) -> str:
    """Escape the three characters RFC 5424 section 6.3.3 reserves.

    Examples
    --------
    >>> escape_param_value('say "hi" [now]')
    'say \\\\"hi\\\\" [now\\\\]'
    """
    return value.translate(_ESCAPES)


def encode_structured_data(data: StructuredData, *, escape: bool = False) -> str:
    """Serialise ``data`` into STRUCTURED-DATA.

    Parameters
    ----------
    data:
        Mapping from SD-ID to a mapping of parameter names to values. Groups and
        parameters are emitted in the mapping's iteration order.
    escape:
        When ``True`` apply :func:`escape_param_value` to every value. The
        default keeps values verbatim.

    Examples
    --------
    >>> encode_structured_data({})
    '-'
    >>> encode_structured_data({"exampleSDID@0": {"iut": "3"}})
    '[exampleSDID@0 iut="3"]'
    """
    if not data:
        return NILVALUE

    blocks: list[str] = []
    for sd_id, params in data.items():
        parts = [f"[{sd_id}"]
        for name, value in params.items():
            text = escape_param_value(str(value)) if escape else value
            parts.append(f' {name}="{text}"')
        parts.append("]")
        blocks.append("".join(parts))
    return "".join(blocks)


__all__ = ["NILVALUE", "StructuredData", "encode_structured_data", "escape_param_value"]
