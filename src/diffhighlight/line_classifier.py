"""Streaming classification of unified diff lines."""

import logging
from typing import List

from diffhighlight.highlight_patterns import is_hunk_header, is_pair_line, is_unchanged_line
from diffhighlight.highlight_printer import HighlightPrinter
from diffhighlight.pair_renderer import PairRenderer


class LineClassifier:
    """
    Decides, line by line, what to do with unified diff input.

    Lines outside a hunk, context lines and hunk headers are printed as they
    are. Consecutive added/removed lines inside a hunk are held in a pending
    block that is rendered as a whole once the run ends.
    """

    def __init__(self, printer: HighlightPrinter, renderer: PairRenderer) -> None:
        """
        Initialize the classifier.

        Args:
            printer: Output buffer for pass-through lines
            renderer: Renderer for completed added/removed blocks
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._printer = printer
        self._renderer = renderer
        self._in_hunk = False
        self._pending: List[str] = []

    @property
    def in_hunk(self) -> bool:
        return self._in_hunk

    def has_pending(self) -> bool:
        """Check if an added/removed block is waiting to be rendered."""
        return bool(self._pending)

    def handle_line(self, line: str) -> None:
        """
        Classify one input line.

        Args:
            line: Line text without its trailing newline
        """
        if not self._in_hunk:
            if is_hunk_header(line):
                self._in_hunk = True

            self._printer.print(line + '\n')
            return

        if is_pair_line(line):
            self._pending.append(line + '\n')
            return

        if not is_unchanged_line(line) and not is_hunk_header(line):
            self._in_hunk = False

        self.flush()
        self._printer.print(line + '\n')

    def flush(self) -> None:
        """Render the pending block, if any."""
        if not self._pending:
            return

        block = ''.join(self._pending)
        self._pending.clear()
        self._renderer.render(block)

    def finish(self) -> None:
        """Render whatever is still pending at the end of input."""
        if self._pending:
            self._logger.debug("flushing %d pending line(s) at end of input", len(self._pending))

        self.flush()
