"""Line classification patterns for unified diff text, tolerant of ANSI colour codes."""

import re

COLOR_RULE = r'\x1b\[[0-9;]*m'

COLOR_PATTERN = re.compile(COLOR_RULE)
ADDED_LINE_PATTERN = re.compile(r'^(?:' + COLOR_RULE + r')*\+')
REMOVED_LINE_PATTERN = re.compile(r'^(?:' + COLOR_RULE + r')*-')
UNCHANGED_LINE_PATTERN = re.compile(r'^(?:' + COLOR_RULE + r')*[\t\n\f\r ]')
HUNK_HEADER_PATTERN = re.compile(r'^(?:' + COLOR_RULE + r')*@@')


def strip_color(text: str) -> str:
    """Remove every ANSI colour escape sequence from text."""
    return COLOR_PATTERN.sub('', text)


def is_pair_line(line: str) -> bool:
    """Check if a line is an added or removed line."""
    return bool(ADDED_LINE_PATTERN.match(line) or REMOVED_LINE_PATTERN.match(line))


def is_unchanged_line(line: str) -> bool:
    return bool(UNCHANGED_LINE_PATTERN.match(line))


def is_hunk_header(line: str) -> bool:
    return bool(HUNK_HEADER_PATTERN.match(line))
