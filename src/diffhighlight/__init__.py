"""
Intra-line highlighting for unified diffs.

This package re-emits a unified diff stream with the changed spans of each
paired added/removed line marked, so small edits stand out from whole-line
changes.
"""

from diffhighlight.highlight_config import HighlightConfig
from diffhighlight.highlight_exceptions import (
    DiffHighlightError,
    HighlightConfigError,
    MalformedBlockError,
    SegmentNotFoundError,
    StreamBrokenError,
)
from diffhighlight.highlight_printer import HighlightPrinter
from diffhighlight.highlight_reader import (
    DiffHighlightReader,
    highlight_lines,
    highlight_stream,
    highlight_text,
)
from diffhighlight.highlight_style import HighlightStyle, REVERSE_VIDEO_STYLE
from diffhighlight.highlight_types import DiffPair, Segment, SegmentKind, Side
from diffhighlight.line_classifier import LineClassifier
from diffhighlight.pair_renderer import PairRenderer
from diffhighlight.side_iterator import SideIterator

__version__ = "1.0.0"

__all__ = [
    # Exceptions
    'DiffHighlightError',
    'MalformedBlockError',
    'SegmentNotFoundError',
    'HighlightConfigError',
    'StreamBrokenError',
    # Types
    'Segment',
    'SegmentKind',
    'Side',
    'DiffPair',
    'HighlightStyle',
    'REVERSE_VIDEO_STYLE',
    'HighlightConfig',
    # Core classes
    'SideIterator',
    'PairRenderer',
    'HighlightPrinter',
    'LineClassifier',
    'DiffHighlightReader',
    # Helpers
    'highlight_text',
    'highlight_lines',
    'highlight_stream',
]
