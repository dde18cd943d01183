"""Depth- and string-aware scanner for the inventory document.

The data file is a JSON array of flat objects.  Rather than handing it to
a full JSON parser, the document is cut at top-level separators: a comma
only separates entries when it sits outside every ``"..."`` span and at
brace depth zero.  Pairs inside an object are cut the same way, with
``[...]`` nesting tracked as well.

This is more lenient than :mod:`json`: trailing commas, unquoted keys and
bare words as values are all accepted.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Any

from pyvms.exceptions import VmsDocumentError, VmsRecordError

_INT_RE = re.compile(r"[+-]?\d+")

_SIMPLE_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def _top_level_positions(content: str, separator: str, *, track_brackets: bool) -> Iterator[int]:
    """Yield indexes of *separator* outside strings and nesting."""
    depth = 0
    bracket_depth = 0
    in_string = False
    escaped = False

    for index, char in enumerate(content):
        if in_string:
            if char == "\\" and not escaped:
                escaped = True
            elif char == '"' and not escaped:
                in_string = False
            else:
                escaped = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif track_brackets and char == "[":
            bracket_depth += 1
        elif track_brackets and char == "]":
            bracket_depth -= 1
        elif char == separator and depth == 0 and bracket_depth == 0:
            yield index


def split_top_level(content: str, *, track_brackets: bool = False) -> list[str]:
    """Split *content* on top-level commas, trimming every piece.

    Empty pieces are kept so callers can tell a trailing comma apart
    from a missing value if they care to.
    """
    pieces: list[str] = []
    start = 0
    for index in _top_level_positions(content, ",", track_brackets=track_brackets):
        pieces.append(content[start:index].strip())
        start = index + 1
    if start < len(content):
        pieces.append(content[start:].strip())
    return pieces


def find_top_level(content: str, separator: str) -> int:
    """Return the index of the first top-level *separator*, or ``-1``."""
    return next(_top_level_positions(content, separator, track_brackets=True), -1)


def _is_wrapped(text: str, opening: str, closing: str) -> bool:
    return len(text) >= 2 and text.startswith(opening) and text.endswith(closing)


def split_document(text: str) -> list[str]:
    """Return the object substrings of an array document.

    Raises :class:`VmsDocumentError` when the trimmed text is not
    wrapped in ``[`` and ``]``.
    """
    body = text.strip()
    if not _is_wrapped(body, "[", "]"):
        raise VmsDocumentError("document is not a JSON array")
    interior = body[1:-1].strip()
    if not interior:
        return []
    return [piece for piece in split_top_level(interior) if piece]


def parse_object(entry: str) -> dict[str, Any]:
    """Parse one ``{...}`` entry into a dict of scalar values.

    Pairs without a key are ignored; a repeated key keeps its last
    value. Raises :class:`VmsRecordError` when *entry* is not wrapped
    in braces.
    """
    text = entry.strip()
    if not _is_wrapped(text, "{", "}"):
        raise VmsRecordError(f"entry is not a JSON object: {text[:40]!r}")

    result: dict[str, Any] = {}
    for pair in split_top_level(text[1:-1].strip(), track_brackets=True):
        if not pair:
            continue
        colon = find_top_level(pair, ":")
        if colon <= 0:
            continue
        key = pair[:colon].strip()
        if _is_wrapped(key, '"', '"'):
            key = unescape(key[1:-1])
        result[key] = parse_value(pair[colon + 1 :])
    return result


def parse_value(token: str) -> Any:
    """Interpret a raw value token.

    Quoted text becomes a string, ``true``/``false`` a bool, ``null``
    ``None``.  Tokens containing ``.`` are read as floats, other numeric
    tokens as ints (falling back to float for exponents).  Anything else
    is returned unchanged as an opaque string.
    """
    value = token.strip()
    if _is_wrapped(value, '"', '"'):
        return unescape(value[1:-1])
    if value == "true":
        return True
    if value == "false":
        return False
    if value == "null":
        return None
    if "." not in value and _INT_RE.fullmatch(value):
        return int(value)
    try:
        return float(value)
    except ValueError:
        return value


def _read_code_unit(text: str, index: int) -> int | None:
    """Return the ``\\uXXXX`` code unit starting at *index*, if any."""
    if text[index : index + 2] != "\\u":
        return None
    digits = text[index + 2 : index + 6]
    if len(digits) != 4:
        return None
    try:
        return int(digits, 16)
    except ValueError:
        return None


def unescape(text: str) -> str:
    """Reverse JSON string escapes.

    Unknown escapes and ``\\uXXXX`` escapes naming an unpaired surrogate are
    kept verbatim.
    """
    if "\\" not in text:
        return text

    out: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char != "\\" or index + 1 >= length:
            out.append(char)
            index += 1
            continue

        code = _read_code_unit(text, index)
        if code is not None:
            if 0xD800 <= code <= 0xDBFF:
                low = _read_code_unit(text, index + 6)
                if low is not None and 0xDC00 <= low <= 0xDFFF:
                    out.append(chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)))
                    index += 12
                    continue
            if 0xD800 <= code <= 0xDFFF:
                # unpaired surrogate, keep the escape text
                out.append(text[index : index + 6])
            else:
                out.append(chr(code))
            index += 6
            continue

        replacement = _SIMPLE_ESCAPES.get(text[index + 1])
        if replacement is None:
            out.append(char)
            index += 1
        else:
            out.append(replacement)
            index += 2
    return "".join(out)
