"""Leading metadata block parsing.

A document may open with a block such as::

    ---
    title: "Getting started"
    author: Jane
    ---

Only ``title`` and ``author`` are recognised; other keys are ignored so new
fields can be added to documents without breaking older servers. A missing
or unterminated block is not an error: the document is returned untouched.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from mdcorpus.models import Metadata

DELIMITER = b"---"
_RECOGNISED_KEYS = ("title", "author")


def _is_delimiter(line: bytes) -> bool:
    return line == DELIMITER or line == DELIMITER + b"\r"


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def parse_fields(lines: List[bytes]) -> Dict[str, str]:
    """Split ``key: value`` lines into a dict of lower-cased keys."""
    fields: Dict[str, str] = {}
    for raw in lines:
        line = raw.decode("utf-8", errors="replace").strip()
        if not line or ":" not in line:
            continue
        key, value = line.split(":", 1)
        fields[key.strip().lower()] = _strip_quotes(value.strip())
    return fields


def extract_metadata(content: bytes) -> Tuple[Metadata, bytes]:
    """Strip the metadata block from *content* and parse it.

    Returns the parsed metadata and the remaining body. Never raises.
    """
    lines = content.split(b"\n")
    # A lone "---" with no line terminator cannot open a block.
    if len(lines) < 2 or not _is_delimiter(lines[0]):
        return Metadata(), content

    closing: Optional[int] = None
    for index in range(1, len(lines)):
        if _is_delimiter(lines[index]):
            closing = index
            break
    if closing is None:
        return Metadata(), content

    fields = parse_fields(lines[1:closing])
    values = {key: fields.get(key) or None for key in _RECOGNISED_KEYS}
    body = b"\n".join(lines[closing + 1 :])
    return Metadata(**values), body
