"""Dual-pass iteration over a shared segment sequence."""

from typing import Iterator, List

from diffhighlight.highlight_types import Segment, Side


class SideIterator:
    """
    Walks one segment sequence twice, once per side of a pair block.

    The first pass skips INSERT segments and so yields the deleted side
    (EQUAL and DELETE segments). When it runs out the iterator flips, rewinds,
    and skips DELETE segments instead, yielding the inserted side. The end is
    reached only once both passes are exhausted.
    """

    def __init__(self, segments: List[Segment]) -> None:
        """
        Initialize the iterator.

        Args:
            segments: Split segments, in oracle order
        """
        self._segments = segments
        self._index = 0
        self._flipped = False

    @property
    def side(self) -> Side:
        """Side whose pass is currently being walked."""
        return Side.INSERTED if self._flipped else Side.DELETED

    def __iter__(self) -> Iterator[Segment]:
        return self

    def __next__(self) -> Segment:
        segment = self.next()
        if segment is None:
            raise StopIteration

        return segment

    def next(self) -> Segment | None:
        """
        Get the next segment, moving on to the inserted pass when needed.

        Returns:
            The next segment, or None once both passes are exhausted
        """
        segment = self._next_unskipped()
        if segment is None and not self._flipped:
            self._flip()
            segment = self._next_unskipped()

        return segment

    def next_for(self, side: Side) -> Segment | None:
        """
        Get the next segment of one side's pass only.

        Asking for the inserted side abandons whatever is left of the deleted
        pass. Asking for the deleted side after the flip returns None.

        Args:
            side: Side being rendered

        Returns:
            The next segment of that side, or None when its pass is exhausted
        """
        if side is Side.INSERTED and not self._flipped:
            self._flip()

        if side is not self.side:
            return None

        return self._next_unskipped()

    def _flip(self) -> None:
        self._flipped = True
        self._index = 0

    def _next_unskipped(self) -> Segment | None:
        skipped_kind = self.side.skipped_kind
        while self._index < len(self._segments):
            segment = self._segments[self._index]
            self._index += 1
            if segment.kind is not skipped_kind:
                return segment

        return None
