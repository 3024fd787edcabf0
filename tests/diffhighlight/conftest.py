"""Shared fixtures and utilities for diffhighlight tests."""

import io
from typing import List

import pytest

from diffhighlight.highlight_config import HighlightConfig
from diffhighlight.highlight_printer import HighlightPrinter
from diffhighlight.highlight_reader import DiffHighlightReader
from diffhighlight.highlight_style import REVERSE_VIDEO_STYLE
from diffhighlight.highlight_types import Segment
from diffhighlight.pair_renderer import PairRenderer
from diffhighlight.segment_oracle import sequence_matcher_segments


HL = REVERSE_VIDEO_STYLE.insert_begin
END = REVERSE_VIDEO_STYLE.insert_end


def marked(text: str) -> str:
    """Wrap text in the default highlight markers."""
    return f"{HL}{text}{END}"


class FixedOracle:
    """Oracle that returns a canned segment list and records its calls."""

    def __init__(self, segments: List[Segment]):
        self.segments = segments
        self.calls: List[tuple[str, str]] = []

    def __call__(self, old: str, new: str) -> List[Segment]:
        self.calls.append((old, new))
        return list(self.segments)


@pytest.fixture
def difflib_config():
    """Configuration using the deterministic difflib oracle."""
    return HighlightConfig(oracle='difflib')


@pytest.fixture
def printer():
    """Create a printer with the default style."""
    return HighlightPrinter()


@pytest.fixture
def renderer(printer):
    """Create a pair renderer backed by the difflib oracle."""
    return PairRenderer(printer, sequence_matcher_segments)


@pytest.fixture
def make_reader():
    """Factory for readers over in-memory diff text."""
    def _create_reader(text: str, config: HighlightConfig | None = None) -> DiffHighlightReader:
        return DiffHighlightReader(io.BytesIO(text.encode('utf-8')), config)
    return _create_reader


@pytest.fixture
def strip_markers():
    """Remove default highlight markers from rendered text."""
    return REVERSE_VIDEO_STYLE.strip
