"""XML Blob.

Build small XML documents from immutable value trees and print them, with
optional masking of sensitive values for logs and diagnostics.

Progressive API Disclosure:
- Level 1: Factory functions - node(), attrs(), attr(), text(), cdata(), mask()
- Level 2: Configured printing - PrinterConfig, StringPrinter, StreamPrinter
- Level 3: Custom sinks - Printer subclasses passed to Node.write_to()
"""

__version__ = "0.1.0"
__author__ = "XML Blob Team"

# Level 1: Factory functions
from .tree.factory import (
    attr,
    attrs,
    cdata,
    empty_attr,
    empty_attrs,
    empty_cdata,
    empty_node,
    empty_text,
    mask,
    node,
    text,
)

# Blob kinds
from .tree.blobs import Attr, Attrs, Blob, Cdata, Node, Text

# Level 2: Printers and configuration
from .printing.printer import Printer, StreamPrinter, StringPrinter
from .shared.config import DEFAULT_MASK, AttributeOrder, BlobConfig, PrinterConfig
from .shared.errors import InvalidArgumentError

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Factory functions
    "node",
    "attrs",
    "attr",
    "text",
    "cdata",
    "mask",
    "empty_node",
    "empty_attr",
    "empty_attrs",
    "empty_text",
    "empty_cdata",

    # Blob kinds
    "Blob",
    "Node",
    "Attrs",
    "Attr",
    "Text",
    "Cdata",

    # Level 2: Printers and configuration
    "Printer",
    "StringPrinter",
    "StreamPrinter",
    "PrinterConfig",
    "BlobConfig",
    "AttributeOrder",
    "DEFAULT_MASK",

    # Errors
    "InvalidArgumentError",
]
