"""Character layer for XML blob printing.

Provides XML 1.1 escaping for text content and attribute values.
"""

from .escaping import PREDEFINED_ENTITIES, escape_xml11

__all__ = [
    "PREDEFINED_ENTITIES",
    "escape_xml11",
]
