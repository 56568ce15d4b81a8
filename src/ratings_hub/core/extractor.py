"""Turn raw issues into catalog items."""

import re
from typing import Optional

from ratings_hub.core.entities import FrontMatter, Item, RawIssue
from ratings_hub.core.front_matter import parse_front_matter, render_front_matter

DEFAULT_TITLE_PREFIX = "[Item]"
ITEM_FIELDS = ("url", "thumbnail", "summary")


def fallback_field(body: str, key: str) -> Optional[str]:
    """Scan the raw body for a ``key: value`` line (case-insensitive)."""
    pattern = re.compile(
        rf"^{re.escape(key)}[ \t]*:[ \t]*(\S.*?)[ \t]*$", re.IGNORECASE | re.MULTILINE
    )
    for match in pattern.finditer((body or "").replace("\r\n", "\n")):
        # Block indicators belong to the front matter, not to a value
        if match.group(1) not in (">", "|"):
            return match.group(1)
    return None


def resolve_field(front_matter: FrontMatter, body: str, key: str) -> Optional[str]:
    """Front-matter value first, then a line scan of the body."""
    value = front_matter.meta.get(key)
    if value:
        return value
    return fallback_field(body, key) or None


def strip_title_prefix(title: str, prefix: str = DEFAULT_TITLE_PREFIX) -> str:
    """Drop a leading tag marker such as ``[Item]`` from a title."""
    if not prefix:
        return title
    return re.sub(rf"^{re.escape(prefix)}\s*", "", title, flags=re.IGNORECASE)


def extract_item(issue: RawIssue) -> Item:
    """Build an Item from a raw issue. Pure; same input gives same Item."""
    body = issue.body or ""
    front_matter = parse_front_matter(body)
    
    summary = resolve_field(front_matter, body, "summary")
    if summary is None:
        summary = front_matter.content.strip()
    
    return Item(
        number=issue.number,
        title=issue.title,
        url=resolve_field(front_matter, body, "url"),
        thumbnail=resolve_field(front_matter, body, "thumbnail"),
        summary=summary,
        created_at=issue.created_at,
        detail_url=issue.html_url,
        author=issue.author,
    )


def item_body_template(summary_hint: str = "Describe the item here.") -> str:
    """Issue body skeleton for submitting a new item."""
    return render_front_matter(
        {field: "" for field in ITEM_FIELDS},
        summary_hint,
    )
