"""Printer sinks that blob trees serialize themselves into.

A printer is the only mutable object involved in serialization. Blobs call
``append``/``append_char`` on it while walking the tree and ask it whether
masked values should be written. Printers are not thread-safe; give each
concurrent serialization its own instance.

Examples:
    In-memory printing:
    >>> printer = StringPrinter()
    >>> printer.append("<a").append_char("/").append(">")
    StringPrinter(mask=False, length=4)
    >>> str(printer)
    '<a/>'

    Writing straight to a file:
    >>> with open("out.xml", "w", encoding="utf-8") as stream:
    ...     tree.write_to(StreamPrinter(stream))
"""

import io
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from xml_blob.shared.config import PrinterConfig


class Printer(ABC):
    """Abstract character sink with a masked-mode flag.

    Subclasses implement :meth:`_write`; the public append methods are built
    on top of it and return the printer so calls can be chained.
    """

    def __init__(self, mask: bool = False, config: Optional[PrinterConfig] = None) -> None:
        """Initialize the printer.

        Args:
            mask: Write masked replacements instead of original values
            config: Full printer configuration; its ``mask`` flag wins over
                the ``mask`` argument when both are given
        """
        self._config = config if config is not None else PrinterConfig(mask=mask)

    @property
    def config(self) -> PrinterConfig:
        """Printer configuration."""
        return self._config

    @property
    def mask(self) -> bool:
        """Whether masked blobs print their replacement."""
        return self._config.mask

    def should_mask(self) -> bool:
        """Check if masked blobs should print their replacement value."""
        return self._config.mask

    @abstractmethod
    def _write(self, text: str) -> None:
        """Hand a chunk of characters to the underlying sink."""

    def append(self, text: str) -> "Printer":
        """Append a string."""
        if text:
            self._write(text)
        return self

    def append_range(self, text: str, start: int, end: int) -> "Printer":
        """Append ``text[start:end]``.

        Raises:
            IndexError: If the range does not lie within ``text``
        """
        if not 0 <= start <= end <= len(text):
            raise IndexError(
                f"range [{start}, {end}) out of bounds for length {len(text)}"
            )
        return self.append(text[start:end])

    def append_char(self, char: str) -> "Printer":
        """Append a single character.

        Raises:
            ValueError: If ``char`` is not exactly one character long
        """
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {len(char)}")
        self._write(char)
        return self


class StringPrinter(Printer):
    """Printer that accumulates output in memory.

    ``str(printer)`` returns everything appended so far.
    """

    def __init__(self, mask: bool = False, config: Optional[PrinterConfig] = None) -> None:
        super().__init__(mask, config)
        self._buffer = io.StringIO()

    def _write(self, text: str) -> None:
        self._buffer.write(text)

    def getvalue(self) -> str:
        """Get the accumulated output."""
        return self._buffer.getvalue()

    def __len__(self) -> int:
        return self._buffer.tell()

    def __str__(self) -> str:
        return self._buffer.getvalue()

    def __repr__(self) -> str:
        return f"StringPrinter(mask={self.mask}, length={len(self)})"


class StreamPrinter(Printer):
    """Printer that writes through to a text stream such as an open file.

    The stream is never closed by the printer; its lifetime belongs to the
    caller.
    """

    def __init__(
        self,
        stream: TextIO,
        mask: bool = False,
        config: Optional[PrinterConfig] = None
    ) -> None:
        """Initialize the stream printer.

        Args:
            stream: Writable text stream
            mask: Write masked replacements instead of original values
            config: Full printer configuration
        """
        super().__init__(mask, config)
        self.stream = stream
        self.characters_written = 0

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.characters_written += len(text)

    def __repr__(self) -> str:
        return (
            f"StreamPrinter(mask={self.mask}, "
            f"characters_written={self.characters_written})"
        )
