"""Tests for the item extractor."""

from datetime import datetime, timezone

from ratings_hub.core import (
    RawIssue,
    UserRef,
    extract_item,
    item_body_template,
    parse_front_matter,
    strip_title_prefix,
)
from ratings_hub.core.extractor import fallback_field


def make_issue(body: str, title: str = "[Item] Cool Thing") -> RawIssue:
    return RawIssue(
        number=7,
        title=title,
        body=body,
        created_at=datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc),
        html_url="https://github.com/owner/repo/issues/7",
        author=UserRef(login="bob"),
        comments_url="https://api.github.com/repos/owner/repo/issues/7/comments",
        comment_count=2,
    )


def test_extract_from_front_matter() -> None:
    """Test fields come from the front-matter block."""
    issue = make_issue(
        "---\nurl: https://cool.example\nthumbnail: https://cool.example/t.png\n"
        "summary: >\n  A cool\n  thing\n---\nMore words"
    )
    
    item = extract_item(issue)
    
    assert item.number == 7
    assert item.title == "[Item] Cool Thing"
    assert item.url == "https://cool.example"
    assert item.thumbnail == "https://cool.example/t.png"
    assert item.summary == "A cool thing"
    assert item.detail_url == "https://github.com/owner/repo/issues/7"
    assert item.author.login == "bob"
    assert item.created_at == issue.created_at


def test_fallback_to_body_scan() -> None:
    """Test issue-form style bodies without front matter."""
    issue = make_issue("Some intro\nURL: https://form.example\nthumbnail:   https://form.example/t.png  \n")
    
    item = extract_item(issue)
    
    assert item.url == "https://form.example"
    assert item.thumbnail == "https://form.example/t.png"


def test_summary_falls_back_to_content() -> None:
    """Test summary uses the text after the block when no field is present."""
    issue = make_issue("---\nurl: https://x.org\n---\n\n  Free text summary.  \n")
    
    item = extract_item(issue)
    
    assert item.summary == "Free text summary."


def test_missing_fields() -> None:
    """Test absent url/thumbnail become None and summary is empty."""
    item = extract_item(make_issue(""))
    
    assert item.url is None
    assert item.thumbnail is None
    assert item.summary == ""


def test_block_indicator_is_not_a_fallback_value() -> None:
    """Test an empty folded value does not leak '>' through the body scan."""
    issue = make_issue("---\nsummary: >\n---\nBody text")
    
    item = extract_item(issue)
    
    assert item.summary == "Body text"


def test_fallback_field_is_line_anchored() -> None:
    """Test the scan only matches whole lines starting with the key."""
    assert fallback_field("see url: https://nope", "url") is None
    assert fallback_field("url:\nhttps://nope", "url") is None
    assert fallback_field("Url : https://yes", "url") == "https://yes"


def test_extract_is_idempotent() -> None:
    """Test extracting twice yields equal items."""
    issue = make_issue("---\nurl: https://x.org\n---\nBody")
    
    assert extract_item(issue) == extract_item(issue)


def test_strip_title_prefix() -> None:
    """Test the tag marker is removed case-insensitively."""
    assert strip_title_prefix("[Item] Cool Thing") == "Cool Thing"
    assert strip_title_prefix("[item]Cool Thing") == "Cool Thing"
    assert strip_title_prefix("Cool [Item] Thing") == "Cool [Item] Thing"
    assert strip_title_prefix("[Item] Cool", prefix="") == "[Item] Cool"


def test_item_body_template() -> None:
    """Test the submission skeleton parses back into the item fields."""
    body = item_body_template()
    
    result = parse_front_matter(body)
    
    assert result.meta == {"url": "", "thumbnail": "", "summary": ""}
    assert extract_item(make_issue(body)).summary == "Describe the item here."
