"""Tolerant front-matter parser for issue bodies.

An issue body may open with a metadata block::
    
    ---
    url: https://example.com
    summary: >
      A longer description
      folded onto one line.
    ---
    Free text follows here.

Only flat ``key: value`` pairs are understood. Anything that does not fit is
skipped; the parser never raises.
"""

import re
from enum import Enum
from typing import Optional

from ratings_hub.core.entities import FrontMatter

DELIMITER = "---"

_DELIMITER_RE = re.compile(r"^---\s*$")
_LINE_SPLIT_RE = re.compile(r"\r?\n")

FOLDED = ">"
LITERAL = "|"


class LineKind(str, Enum):
    """Classification of a line inside the block."""
    
    DELIMITER = "delimiter"
    BLANK = "blank"
    KEY = "key"
    CONTINUATION = "continuation"
    MALFORMED = "malformed"


def classify_line(line: str) -> LineKind:
    """Classify one line of a front-matter block."""
    if _DELIMITER_RE.match(line):
        return LineKind.DELIMITER
    if not line.strip():
        return LineKind.BLANK
    if line[0].isspace():
        return LineKind.CONTINUATION
    key, sep, _ = line.partition(":")
    if sep and key.strip():
        return LineKind.KEY
    return LineKind.MALFORMED


def _split_key_line(line: str) -> tuple[str, str]:
    key, _, value = line.partition(":")
    return key.strip(), value.strip()


def parse_front_matter(text: Optional[str]) -> FrontMatter:
    """Parse a leading ``---`` block into a mapping and remaining content.
    
    Args:
        text: Raw issue body, may be None
    
    Returns:
        FrontMatter with an empty mapping and the whole text as content
        when there is no complete block
    """
    text = text or ""
    lines = _LINE_SPLIT_RE.split(text)
    
    if not lines or classify_line(lines[0]) is not LineKind.DELIMITER:
        return FrontMatter(meta={}, content=text)
    
    meta: dict[str, str] = {}
    current_key: Optional[str] = None
    joiner: Optional[str] = None  # set while accumulating a multiline value
    
    for index in range(1, len(lines)):
        line = lines[index]
        kind = classify_line(line)
        
        if kind is LineKind.DELIMITER:
            content = "\n".join(lines[index + 1:])
            return FrontMatter(
                meta={key: value.strip() for key, value in meta.items()},
                content=content,
            )
        
        if kind is LineKind.BLANK:
            continue
        
        if kind is LineKind.KEY:
            current_key, value = _split_key_line(line)
            if value in (FOLDED, LITERAL):
                joiner = " " if value == FOLDED else "\n"
                meta[current_key] = ""
            else:
                joiner = None
                meta[current_key] = value
            continue
        
        # Continuation or malformed: only meaningful inside a multiline value
        if joiner is not None and current_key is not None:
            piece = line.strip()
            existing = meta[current_key]
            meta[current_key] = f"{existing}{joiner}{piece}" if existing else piece
    
    # No closing delimiter
    return FrontMatter(meta={}, content=text)


def render_front_matter(meta: dict[str, str], content: str = "") -> str:
    """Serialize a mapping as a front-matter block followed by content."""
    lines = [DELIMITER]
    for key, value in meta.items():
        if "\n" in value:
            lines.append(f"{key}: {LITERAL}")
            lines.extend(f"  {part}" for part in value.split("\n"))
        else:
            lines.append(f"{key}: {value}")
    lines.append(DELIMITER)
    
    block = "\n".join(lines)
    return f"{block}\n{content}" if content else f"{block}\n"
