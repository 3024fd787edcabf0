"""Character-level diff oracles producing typed segments."""

import difflib
from typing import Callable, Dict, List

from diff_match_patch import diff_match_patch

from diffhighlight.highlight_types import Segment, SegmentKind


SegmentOracle = Callable[[str, str], List[Segment]]


_DMP_KINDS = {
    diff_match_patch.DIFF_EQUAL: SegmentKind.EQUAL,
    diff_match_patch.DIFF_DELETE: SegmentKind.DELETE,
    diff_match_patch.DIFF_INSERT: SegmentKind.INSERT,
}


def diff_match_patch_segments(old: str, new: str) -> List[Segment]:
    """
    Diff two strings character by character using diff-match-patch.

    Line-mode speedup is disabled so that segments always follow character edits.

    Args:
        old: Deleted side text
        new: Inserted side text

    Returns:
        Ordered segments; EQUAL+DELETE rebuild old, EQUAL+INSERT rebuild new
    """
    diffs = diff_match_patch().diff_main(old, new, False)
    return [Segment(_DMP_KINDS[op], text) for op, text in diffs]


def sequence_matcher_segments(old: str, new: str) -> List[Segment]:
    """
    Diff two strings character by character using difflib.

    A 'replace' opcode is reported as a DELETE segment followed by an INSERT segment.

    Args:
        old: Deleted side text
        new: Inserted side text

    Returns:
        Ordered segments; EQUAL+DELETE rebuild old, EQUAL+INSERT rebuild new
    """
    matcher = difflib.SequenceMatcher(None, old, new, autojunk=False)
    segments: List[Segment] = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == 'equal':
            segments.append(Segment(SegmentKind.EQUAL, old[i1:i2]))

        elif tag == 'delete':
            segments.append(Segment(SegmentKind.DELETE, old[i1:i2]))

        elif tag == 'insert':
            segments.append(Segment(SegmentKind.INSERT, new[j1:j2]))

        else:
            segments.append(Segment(SegmentKind.DELETE, old[i1:i2]))
            segments.append(Segment(SegmentKind.INSERT, new[j1:j2]))

    return segments


ORACLES: Dict[str, SegmentOracle] = {
    'diff-match-patch': diff_match_patch_segments,
    'difflib': sequence_matcher_segments,
}
