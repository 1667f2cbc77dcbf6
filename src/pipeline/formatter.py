"""
Response Formatter

Cleans raw model output into display-ready text:

1. strip bold/italic markers
2. strip heading markers
3. collapse 3+ newlines to 2
4. trim
5. bullet lines are renumbered ("1. ", "2. ", ...) or stripped,
   depending on BulletStyle

The transform only touches markdown decoration and list markers and is
idempotent: format(format(x)) == format(x).
"""

import re
from enum import Enum
from typing import Optional

BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
ITALIC_RE = re.compile(r"\*(.*?)\*")
# Runs of '#' at line start, or a standalone '#' token mid-line.
# Hashtags ("#design") mid-line are kept.
HEADING_RE = re.compile(r"^(?:[ \t]*#+)+[ \t]*|(?<=\s)#+[ \t]+", re.MULTILINE)
EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")
BULLET_RE = re.compile(r"^\s*[*\-•]\s+")
LEADING_MARKERS_RE = re.compile(r"^\s*(?:[*\-•]\s+|#+\s*)+")


class BulletStyle(str, Enum):
    """How bullet lists are rendered."""

    NUMBER = "number"
    STRIP = "strip"


class ResponseFormatter:
    """
    Pure text-to-text cleanup of model replies.

    Args:
        bullet_style: NUMBER renumbers each run of bullet lines starting at 1;
            STRIP removes the markers without numbering.

    Example:
        >>> ResponseFormatter().format("* a\\n* b\\n\\nc\\n* d")
        '1. a\\n2. b\\n\\nc\\n1. d'
    """

    def __init__(self, bullet_style: BulletStyle | str = BulletStyle.NUMBER) -> None:
        self._bullet_style = BulletStyle(bullet_style)

    @property
    def bullet_style(self) -> BulletStyle:
        return self._bullet_style

    def format(self, text: Optional[str]) -> str:
        """
        Format raw model text.

        Args:
            text: Raw reply text (None or empty yields "").

        Returns:
            Cleaned text.
        """
        if not text:
            return ""

        cleaned = strip_markdown(text)

        if self._bullet_style is BulletStyle.STRIP:
            # Stripping an empty bullet can leave a blank line behind
            lines = strip_bullets(cleaned.split("\n"))
            return EXCESS_NEWLINES_RE.sub("\n\n", "\n".join(lines)).strip()

        lines = number_bullets(cleaned.split("\n"))
        return "\n".join(lines).strip()

    __call__ = format


def strip_markdown(text: str) -> str:
    """Remove emphasis and heading markers, collapse blank lines, trim."""
    cleaned = BOLD_RE.sub(r"\1", text)
    cleaned = ITALIC_RE.sub(r"\1", cleaned)
    cleaned = HEADING_RE.sub("", cleaned)
    cleaned = EXCESS_NEWLINES_RE.sub("\n\n", cleaned)
    return cleaned.strip()


def number_bullets(lines: list[str]) -> list[str]:
    """Rewrite bullet lines as an ordered list; any other line resets the counter."""
    result: list[str] = []
    counter = 1
    in_list = False

    for line in lines:
        if BULLET_RE.match(line):
            if not in_list:
                counter = 1
                in_list = True
            result.append(f"{counter}. {BULLET_RE.sub('', line, count=1)}")
            counter += 1
        else:
            in_list = False
            result.append(line)

    return result


def strip_bullets(lines: list[str]) -> list[str]:
    """Remove bullet markers without numbering."""
    return [
        LEADING_MARKERS_RE.sub("", line, count=1) if BULLET_RE.match(line) else line
        for line in lines
    ]
