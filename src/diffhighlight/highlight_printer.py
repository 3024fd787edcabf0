"""Output buffer for rendered diff text."""

from diffhighlight.highlight_style import HighlightStyle, REVERSE_VIDEO_STYLE


class HighlightPrinter:
    """
    Accumulates rendered text as encoded bytes until a reader drains it.

    The buffer grows when text is printed and shrinks as it is drained; it is
    never rewound.
    """

    def __init__(
        self,
        style: HighlightStyle = REVERSE_VIDEO_STYLE,
        encoding: str = 'utf-8'
    ) -> None:
        """
        Initialize the printer.

        Args:
            style: Markers written around deleted and inserted spans
            encoding: Encoding used to turn rendered text into bytes
        """
        self._style = style
        self._encoding = encoding
        self._buffer = bytearray()

    @property
    def style(self) -> HighlightStyle:
        return self._style

    def __len__(self) -> int:
        return len(self._buffer)

    def print(self, text: str) -> None:
        """Append plain text."""
        self._buffer += text.encode(self._encoding, 'surrogateescape')

    def print_insert(self, text: str) -> None:
        """Append text highlighted as inserted."""
        self.print(self._style.insert_begin + text + self._style.insert_end)

    def print_delete(self, text: str) -> None:
        """Append text highlighted as deleted."""
        self.print(self._style.delete_begin + text + self._style.delete_end)

    def drain(self, size: int = -1) -> bytes:
        """
        Remove and return bytes from the front of the buffer.

        Args:
            size: Maximum number of bytes to return, or -1 for all of them

        Returns:
            The drained bytes (empty if nothing is buffered)
        """
        if size < 0 or size >= len(self._buffer):
            data = bytes(self._buffer)
            self._buffer.clear()
            return data

        data = bytes(self._buffer[:size])
        del self._buffer[:size]
        return data
