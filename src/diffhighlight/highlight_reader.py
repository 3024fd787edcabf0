"""Pull-based byte stream over the highlighting pipeline."""

import io
import logging
import shutil
from typing import BinaryIO, Iterable, Iterator

from diffhighlight.highlight_config import HighlightConfig
from diffhighlight.highlight_exceptions import DiffHighlightError, StreamBrokenError
from diffhighlight.highlight_printer import HighlightPrinter
from diffhighlight.line_classifier import LineClassifier
from diffhighlight.pair_renderer import PairRenderer


class DiffHighlightReader(io.RawIOBase):
    """
    Readable binary stream that yields the highlighted form of a unified diff.

    Input lines are only pulled while fewer than `min_buffer_size` rendered
    bytes are waiting, so memory stays bounded by one pending added/removed
    block plus the undrained output.
    """

    def __init__(self, source: BinaryIO, config: HighlightConfig | None = None) -> None:
        """
        Initialize the reader.

        Args:
            source: Binary stream of unified diff text
            config: Highlighter settings; defaults are used when omitted
        """
        super().__init__()
        self._logger = logging.getLogger(self.__class__.__name__)
        self._config = config or HighlightConfig()
        self._source = source
        self._printer = HighlightPrinter(self._config.style, self._config.encoding)
        self._classifier = LineClassifier(
            self._printer,
            PairRenderer(self._printer, self._config.get_oracle())
        )
        self._input_done = False
        self._error: BaseException | None = None

    def readable(self) -> bool:
        return True

    def readinto(self, b: bytearray | memoryview) -> int:  # type: ignore[override]
        """
        Fill a caller-supplied buffer with rendered bytes.

        Returns:
            Number of bytes written; 0 only at end of stream

        Raises:
            DiffHighlightError: If the input cannot be highlighted
            StreamBrokenError: If a previous read already failed
            OSError: If reading the source fails
        """
        if self._error is not None:
            raise StreamBrokenError(
                "Stream is broken by an earlier error",
                {'cause': str(self._error)}
            ) from self._error

        try:
            self._fill()

        except (DiffHighlightError, OSError) as e:
            self._error = e
            raise

        data = self._printer.drain(len(b))
        b[:len(data)] = data
        return len(data)

    def _fill(self) -> None:
        while len(self._printer) < self._config.min_buffer_size and not self._input_done:
            raw = self._source.readline()
            if not raw:
                self._input_done = True
                self._classifier.finish()
                self._logger.debug("end of input")
                break

            self._classifier.handle_line(chomp(raw.decode(self._config.encoding, 'surrogateescape')))


def chomp(line: str) -> str:
    """Remove one trailing line terminator ('\\n' or '\\r\\n') from a line."""
    if line.endswith('\n'):
        line = line[:-1]

    if line.endswith('\r'):
        line = line[:-1]

    return line


def highlight_stream(source: BinaryIO, sink: BinaryIO, config: HighlightConfig | None = None) -> int:
    """
    Copy the highlighted form of a diff from one binary stream to another.

    Args:
        source: Binary stream of unified diff text
        sink: Binary stream to write to
        config: Highlighter settings

    Returns:
        Number of bytes written
    """
    counter = _CountingWriter(sink)
    with DiffHighlightReader(source, config) as reader:
        shutil.copyfileobj(reader, counter)

    return counter.count


def highlight_text(text: str, config: HighlightConfig | None = None) -> str:
    """
    Highlight a whole diff held in memory.

    Args:
        text: Unified diff text
        config: Highlighter settings

    Returns:
        The highlighted diff
    """
    config = config or HighlightConfig()
    source = io.BytesIO(text.encode(config.encoding, 'surrogateescape'))
    sink = io.BytesIO()
    highlight_stream(source, sink, config)
    return sink.getvalue().decode(config.encoding, 'surrogateescape')


def highlight_lines(lines: Iterable[str], config: HighlightConfig | None = None) -> Iterator[str]:
    """
    Highlight diff lines lazily, yielding rendered text as it becomes available.

    Args:
        lines: Diff lines, with or without trailing newlines
        config: Highlighter settings

    Yields:
        Chunks of rendered text; their concatenation is the highlighted diff
    """
    config = config or HighlightConfig()
    printer = HighlightPrinter(config.style, config.encoding)
    classifier = LineClassifier(printer, PairRenderer(printer, config.get_oracle()))

    for line in lines:
        classifier.handle_line(chomp(line))
        if len(printer) >= config.min_buffer_size:
            yield printer.drain().decode(config.encoding, 'surrogateescape')

    classifier.finish()
    if len(printer):
        yield printer.drain().decode(config.encoding, 'surrogateescape')


class _CountingWriter:
    """Wraps a binary sink and counts the bytes written through it."""

    def __init__(self, sink: BinaryIO) -> None:
        self._sink = sink
        self.count = 0

    def write(self, data: bytes) -> int:
        self._sink.write(data)
        self.count += len(data)
        return len(data)
