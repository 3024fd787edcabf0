"""Rendering of added/removed line blocks with intra-line highlights."""

from collections import deque
import logging
from typing import Deque, Dict, List, Tuple

from diffhighlight.highlight_exceptions import MalformedBlockError, SegmentNotFoundError
from diffhighlight.highlight_patterns import strip_color
from diffhighlight.highlight_printer import HighlightPrinter
from diffhighlight.highlight_types import DiffPair, Segment, SegmentKind, Side
from diffhighlight.segment_oracle import SegmentOracle, diff_match_patch_segments
from diffhighlight.segment_splitter import split_segments
from diffhighlight.side_iterator import SideIterator


Span = Tuple[SegmentKind, str]


def block_lines(block: str) -> List[str]:
    """Split newline-terminated block text into lines without their newlines."""
    lines = block.split('\n')
    if lines[-1] == '':
        lines.pop()

    return lines


def line_side(line: str) -> Side:
    """
    Work out which side of a pair block a line belongs to.

    Args:
        line: Colour-free block line, prefix included

    Returns:
        Side.DELETED for '-' lines, Side.INSERTED for '+' lines

    Raises:
        MalformedBlockError: If the line starts with anything else
    """
    if line.startswith(Side.DELETED.prefix):
        return Side.DELETED

    if line.startswith(Side.INSERTED.prefix):
        return Side.INSERTED

    raise MalformedBlockError(
        "Unexpected line in added/removed block",
        {'line': line, 'reason': "line does not start with '+' or '-'"}
    )


def build_pair(block: str) -> DiffPair:
    """
    Split a colour-free pair block into its deleted and inserted texts.

    Args:
        block: Newline-terminated '+'/'-' lines

    Returns:
        DiffPair holding each side's line bodies

    Raises:
        MalformedBlockError: If a line is neither added nor removed
    """
    pair = DiffPair()
    for line in block_lines(block):
        if line_side(line) is Side.DELETED:
            pair.deleted.append(line[1:] + '\n')

        else:
            pair.inserted.append(line[1:] + '\n')

    return pair


class _LineCollector:
    """Collects rendered spans and cuts them into lines."""

    def __init__(self) -> None:
        self.lines: List[List[Span]] = []
        self._current: List[Span] = []

    def add(self, kind: SegmentKind, text: str) -> None:
        while text:
            i = text.find('\n')
            if i == -1:
                self._current.append((kind, text))
                return

            if i:
                self._current.append((kind, text[:i]))

            self._current.append((kind, '\n'))
            self.lines.append(self._current)
            self._current = []
            text = text[i + 1:]


class PairRenderer:
    """
    Renders a buffered pair block, highlighting the changed spans of each line.

    Each side is rendered on its own: the side's lines are scanned with a text
    cursor while the side iterator supplies that side's segments. The rendered
    lines of both sides are then put back into the block's original order.
    """

    def __init__(
        self,
        printer: HighlightPrinter,
        oracle: SegmentOracle = diff_match_patch_segments
    ) -> None:
        """
        Initialize the renderer.

        Args:
            printer: Output buffer to render into
            oracle: Character-level diff function
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._printer = printer
        self._oracle = oracle

    def render(self, block: str) -> None:
        """
        Render a pair block into the printer.

        Args:
            block: Newline-terminated '+'/'-' lines, possibly coloured

        Raises:
            MalformedBlockError: If a line is neither added nor removed
            SegmentNotFoundError: If a segment cannot be placed in the block text
        """
        text = strip_color(block)
        pair = build_pair(text)

        if pair.one_side_empty():
            self._logger.debug("one-sided block of %d line(s), passing through", len(block_lines(text)))
            self._printer.print(text)
            self._printer.print('\n')
            return

        segments = split_segments(self._oracle(pair.deleted_text, pair.inserted_text))
        self._logger.debug(
            "rendering block: %d deleted, %d inserted line(s), %d segment(s)",
            len(pair.deleted), len(pair.inserted), len(segments)
        )

        lines = block_lines(text)
        iterator = SideIterator(segments)
        rendered: Dict[Side, Deque[List[Span]]] = {}
        for side in (Side.DELETED, Side.INSERTED):
            side_text = ''.join(line + '\n' for line in lines if line.startswith(side.prefix))
            rendered[side] = deque(self._render_side(side, side_text, iterator))

        for line in lines:
            for kind, span in rendered[line_side(line)].popleft():
                self._print_span(kind, span)

    def _render_side(self, side: Side, text: str, iterator: SideIterator) -> List[List[Span]]:
        """
        Match one side's segments against that side's text.

        Args:
            side: Side being rendered
            text: The side's lines, prefixes and newlines included
            iterator: Segment source, positioned at the start of this side's pass

        Returns:
            Spans for each line of the side, in order

        Raises:
            SegmentNotFoundError: If a segment is missing from the remaining text
        """
        collector = _LineCollector()
        remaining = text

        while remaining:
            segment = iterator.next_for(side)
            if segment is None:
                collector.add(SegmentKind.EQUAL, remaining)
                break

            i = remaining.find(segment.text)
            if i == -1:
                raise self._not_found(segment, side, remaining)

            end = i + len(segment.text)
            if segment.kind is SegmentKind.EQUAL:
                collector.add(SegmentKind.EQUAL, remaining[:end])

            else:
                if i != 0:
                    collector.add(SegmentKind.EQUAL, remaining[:i])

                collector.add(segment.kind, segment.text)

            remaining = remaining[end:]

        leftover = iterator.next_for(side)
        if leftover is not None:
            raise self._not_found(leftover, side, remaining)

        return collector.lines

    def _not_found(self, segment: Segment, side: Side, remaining: str) -> SegmentNotFoundError:
        self._logger.error("segment %r (%s) not found on %s side", segment.text, segment.kind.value, side.name)
        return SegmentNotFoundError(
            "Segment not found in block text",
            {
                'segment': segment.text,
                'kind': segment.kind.value,
                'side': side.name.lower(),
                'remaining': remaining,
            }
        )

    def _print_span(self, kind: SegmentKind, text: str) -> None:
        if kind is SegmentKind.DELETE:
            self._printer.print_delete(text)

        elif kind is SegmentKind.INSERT:
            self._printer.print_insert(text)

        else:
            self._printer.print(text)
