"""Splitting of diff segments at line boundaries."""

from typing import Iterable, List

from diffhighlight.highlight_types import Segment


def split_segment(segment: Segment) -> List[Segment]:
    """
    Split a segment so that no piece spans more than one line.

    The segment text is trimmed first. Each line of it becomes a trimmed
    sub-segment of the same kind, and every line break becomes a segment
    whose text is exactly '\\n'. Pieces left empty by trimming are dropped.

    Args:
        segment: Segment to split

    Returns:
        Sub-segments in order
    """
    text = segment.text.strip()
    pieces: List[Segment] = []

    while True:
        i = text.find('\n')
        if i == -1:
            line = text.strip()
            if line:
                pieces.append(Segment(segment.kind, line))

            return pieces

        line = text[:i].strip()
        if line:
            pieces.append(Segment(segment.kind, line))

        pieces.append(Segment(segment.kind, '\n'))
        text = text[i + 1:]


def split_segments(segments: Iterable[Segment]) -> List[Segment]:
    """Split every segment in a sequence at line boundaries."""
    result: List[Segment] = []
    for segment in segments:
        result.extend(split_segment(segment))

    return result
