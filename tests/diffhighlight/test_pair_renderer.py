"""Tests for rendering added/removed blocks."""

import pytest

from diffhighlight.highlight_exceptions import MalformedBlockError, SegmentNotFoundError
from diffhighlight.highlight_patterns import strip_color
from diffhighlight.highlight_printer import HighlightPrinter
from diffhighlight.highlight_style import HighlightStyle
from diffhighlight.highlight_types import Segment, SegmentKind, Side
from diffhighlight.pair_renderer import PairRenderer, block_lines, build_pair, line_side
from diffhighlight.segment_oracle import diff_match_patch_segments, sequence_matcher_segments

from conftest import FixedOracle, marked


MARKED_NEWLINE = marked('\n')


def rendered(printer):
    return printer.drain().decode('utf-8')


class TestBuildPair:
    """Test splitting a block into deleted and inserted texts."""

    def test_splits_sides(self):
        """Test that bodies are collected per side without prefixes."""
        pair = build_pair('-old one\n-old two\n+new\n')

        assert pair.deleted_text == 'old one\nold two\n'
        assert pair.inserted_text == 'new\n'

    def test_keeps_empty_bodies(self):
        """Test that a bare prefix contributes an empty line."""
        pair = build_pair('-\n+x\n')

        assert pair.deleted_text == '\n'
        assert pair.one_side_empty() is False

    def test_rejects_context_line(self):
        """Test that a line without '+'/'-' is a format violation."""
        with pytest.raises(MalformedBlockError) as exc_info:
            build_pair('-a\n b\n')

        assert exc_info.value.error_details['line'] == ' b'
        assert str(exc_info.value) == "Unexpected line in added/removed block (line=' b')"

    def test_block_lines(self):
        """Test splitting newline-terminated block text."""
        assert block_lines('-a\n+b\n') == ['-a', '+b']
        assert block_lines('-a\r\n') == ['-a\r']

    def test_line_side(self):
        """Test mapping line prefixes to sides."""
        assert line_side('-x') is Side.DELETED
        assert line_side('+x') is Side.INSERTED


class TestPairRendererHighlighting:
    """Test highlight placement."""

    def test_minimal_change(self, renderer, printer):
        """Test that only the changed characters are highlighted."""
        renderer.render('-foo bar\n+foo baz\n')

        assert rendered(printer) == f'-foo ba{marked("r")}\n+foo ba{marked("z")}\n'

    def test_minimal_change_with_diff_match_patch(self, printer):
        """Test the default oracle on the same change."""
        PairRenderer(printer, diff_match_patch_segments).render('-foo bar\n+foo baz\n')

        output = rendered(printer)
        assert output == f'-foo ba{marked("r")}\n+foo ba{marked("z")}\n'
        assert output.startswith('-foo ')
        assert '\n+foo ' in output

    def test_colour_codes_are_stripped(self, renderer, printer):
        """Test that pre-coloured input renders the same as plain input."""
        renderer.render('\x1b[31m-foo bar\x1b[m\n\x1b[32m+foo baz\x1b[m\n')

        assert rendered(printer) == f'-foo ba{marked("r")}\n+foo ba{marked("z")}\n'

    def test_multi_line_block(self, renderer, printer):
        """Test a block whose changes sit on several lines."""
        renderer.render('-x = 1\n-y = 2\n+x = 10\n+y = 20\n')

        assert rendered(printer) == (
            '-x = 1\n'
            '-y = 2\n'
            f'+x = 1{marked("0")}\n'
            f'+y = 2{marked("0")}\n'
        )

    def test_interleaved_lines_keep_their_order(self, renderer, printer):
        """Test that lines of both sides are put back in block order."""
        renderer.render('-a1\n+b1\n-a2\n+b2\n')

        assert rendered(printer) == (
            f'-{marked("a")}1\n'
            f'+{marked("b")}1\n'
            f'-{marked("a")}2\n'
            f'+{marked("b")}2\n'
        )

    def test_custom_markers(self):
        """Test that deleted and inserted spans use their own markers."""
        printer = HighlightPrinter(HighlightStyle('<ins>', '</ins>', '<del>', '</del>'))
        PairRenderer(printer, sequence_matcher_segments).render('-foo bar\n+foo baz\n')

        assert rendered(printer) == '-foo ba<del>r</del>\n+foo ba<ins>z</ins>\n'

    def test_highlighted_line_break(self, printer):
        """Test that a line break inside a deleted span is highlighted like its text."""
        oracle = FixedOracle([
            Segment(SegmentKind.DELETE, 'a\nb'),
            Segment(SegmentKind.INSERT, 'c'),
        ])
        PairRenderer(printer, oracle).render('-a\n-b\n+c\n')

        assert rendered(printer) == f'-{marked("a")}{MARKED_NEWLINE}-{marked("b")}\n+{marked("c")}\n'

    def test_whole_lines_deleted_beside_changed_line(self, printer):
        """Test removed lines after a kept line with the default oracle."""
        PairRenderer(printer, diff_match_patch_segments).render('-a\n-b\n-c\n+a\n')

        assert rendered(printer) == f'-a\n-{marked("b")}{MARKED_NEWLINE}-{marked("c")}\n+a\n'

    def test_whitespace_only_change(self, printer):
        """Test that a whitespace-only change writes no empty marker pair."""
        # The inserted space trims to an empty segment, which is dropped.
        PairRenderer(printer, diff_match_patch_segments).render('-a b\n+a  b\n')

        assert rendered(printer) == '-a b\n+a  b\n'


class TestPairRendererOneSided:
    """Test blocks with only additions or only deletions."""

    def test_only_additions(self, renderer, printer):
        """Test that an all-add block is passed through plus a blank line."""
        renderer.render('+a\n+b\n')
        assert rendered(printer) == '+a\n+b\n\n'

    def test_only_deletions_are_sanitized(self, renderer, printer):
        """Test that colour is stripped from one-sided blocks too."""
        renderer.render('\x1b[31m-gone\x1b[m\n')
        assert rendered(printer) == '-gone\n\n'

    def test_oracle_not_called(self, printer):
        """Test that no diff is run for a one-sided block."""
        oracle = FixedOracle([])
        PairRenderer(printer, oracle).render('-x\n-y\n')

        assert oracle.calls == []


class TestPairRendererReconstruction:
    """Test that rendering never adds, drops or reorders characters."""

    @pytest.mark.parametrize("block", [
        '-foo bar\n+foo baz\n',
        '-    return compute(a, b)\n+    return compute(a, b, c=None)\n',
        '-def f(x):\n-    return x\n+def g(x, y):\n+    return x + y\n',
        '-\tindented   value  \n+  indented value\n',
        '-a\n-\n-b\n+a\n+b\n+\n',
        '-\x1b[31mcoloured\x1b[m\n+\x1b[32mcolored\x1b[m\n',
        '-unicode: café\n+unicode: cafés ☕\n',
        '-x\n+completely different text here\n',
    ])
    def test_reconstruction(self, printer, strip_markers, block):
        """Test that stripping the markers gives back the sanitized block."""
        PairRenderer(printer, diff_match_patch_segments).render(block)

        assert strip_markers(rendered(printer)) == strip_color(block)


class TestPairRendererErrors:
    """Test internal consistency failures."""

    def test_segment_not_found(self, printer):
        """Test a segment that does not occur in the block text."""
        renderer = PairRenderer(printer, FixedOracle([Segment(SegmentKind.EQUAL, 'zzz')]))

        with pytest.raises(SegmentNotFoundError) as exc_info:
            renderer.render('-foo\n+bar\n')

        details = exc_info.value.error_details
        assert details['segment'] == 'zzz'
        assert details['kind'] == 'equal'
        assert details['side'] == 'deleted'

    def test_segments_left_after_text_exhausted(self, printer):
        """Test a side whose text runs out before its segments do."""
        renderer = PairRenderer(printer, FixedOracle([Segment(SegmentKind.EQUAL, 'a\nx')]))

        with pytest.raises(SegmentNotFoundError) as exc_info:
            renderer.render('-a\n+b\n')

        assert exc_info.value.error_details['segment'] == 'x'
        assert exc_info.value.error_details['remaining'] == ''

    def test_malformed_block_writes_nothing(self, renderer, printer):
        """Test that a malformed block fails before any output."""
        with pytest.raises(MalformedBlockError):
            renderer.render('-a\n b\n+c\n')

        assert len(printer) == 0
