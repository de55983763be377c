"""XML 1.1 character escaping for text content and attribute values.

The rules match the XML 1.1 recommendation as commonly implemented by
escaping libraries:

- the five predefined entities are used for ``& < > " '``
- NUL, the non-characters U+FFFE/U+FFFF and lone surrogates are dropped,
  since they cannot be represented even as character references
- restricted C0/C1 control characters are written as decimal references
- everything else, including non-ASCII text, is passed through unchanged
  unless ASCII-only output is requested
"""

from typing import Dict, List, Optional, Tuple

PREDEFINED_ENTITIES: Dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}

# Code points that cannot appear in XML 1.1 in any form
REMOVED_CODE_POINTS: List[int] = [0x0000, 0xFFFE, 0xFFFF]

SURROGATE_RANGE_START = 0xD800
SURROGATE_RANGE_END = 0xDFFF

# Restricted characters, legal only as character references (inclusive ranges)
RESTRICTED_RANGES: List[Tuple[int, int]] = [
    (0x0001, 0x0008),
    (0x000B, 0x000C),
    (0x000E, 0x001F),
    (0x007F, 0x0084),
    (0x0086, 0x009F),
]


def _build_translation_table() -> Dict[int, Optional[str]]:
    table: Dict[int, Optional[str]] = {
        ord(char): entity for char, entity in PREDEFINED_ENTITIES.items()
    }
    for code_point in REMOVED_CODE_POINTS:
        table[code_point] = None
    for code_point in range(SURROGATE_RANGE_START, SURROGATE_RANGE_END + 1):
        table[code_point] = None
    for start, end in RESTRICTED_RANGES:
        for code_point in range(start, end + 1):
            table[code_point] = f"&#{code_point};"
    return table


_XML11_TABLE = _build_translation_table()


def escape_xml11(value: str, ascii_only: bool = False) -> str:
    """Escape a string for use as XML 1.1 character data or attribute value.

    Args:
        value: Raw string to escape
        ascii_only: Write every non-ASCII character as ``&#N;``

    Returns:
        Escaped string, safe to place between tags or inside double quotes

    Examples:
        >>> escape_xml11('a < b & "c"')
        'a &lt; b &amp; &quot;c&quot;'
        >>> escape_xml11("caf\\u00e9", ascii_only=True)
        'caf&#233;'
    """
    if not value:
        return value

    escaped = value.translate(_XML11_TABLE)
    if ascii_only and not escaped.isascii():
        # Surrogates are already gone, so the encode cannot fail
        escaped = escaped.encode("ascii", "xmlcharrefreplace").decode("ascii")
    return escaped
