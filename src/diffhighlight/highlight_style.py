"""Highlight markers written around changed spans."""

from dataclasses import dataclass

REVERSE_VIDEO = '\x1b[7m'
REVERSE_VIDEO_OFF = '\x1b[27m'


@dataclass(frozen=True)
class HighlightStyle:
    """Begin/end markers for deleted and inserted spans."""

    insert_begin: str = REVERSE_VIDEO
    insert_end: str = REVERSE_VIDEO_OFF
    delete_begin: str = REVERSE_VIDEO
    delete_end: str = REVERSE_VIDEO_OFF

    def markers(self) -> tuple[str, str, str, str]:
        """Return all four markers, insert pair first."""
        return (self.insert_begin, self.insert_end, self.delete_begin, self.delete_end)

    def strip(self, text: str) -> str:
        """
        Remove this style's markers from rendered text.

        Args:
            text: Text previously rendered with this style

        Returns:
            The text without any highlight markers
        """
        for marker in self.markers():
            if marker:
                text = text.replace(marker, '')

        return text


REVERSE_VIDEO_STYLE = HighlightStyle()
