"""Classification, noise filtering and enrichment of Oura tag records."""

from __future__ import annotations

import re
from collections.abc import Iterable

from oura_mcp.models import Tag, TagMetadata, TagResponse

# Custom tags carry a UUID as their type code instead of a descriptive one
CUSTOM_TAG_CODE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)

TAG_METADATA_NOTE = (
    "Custom tags (with GUID tag_type_code) represent user-defined entries, "
    "often containing meal information. Standard tags have descriptive "
    "tag_type_code values like 'tag_generic_supplements'."
)


def is_custom_tag_code(code: str | None) -> bool:
    """True if ``code`` is a canonical 8-4-4-4-12 hex identifier."""
    if not code:
        return False
    return CUSTOM_TAG_CODE.fullmatch(code) is not None


def is_custom(tag: Tag) -> bool:
    return is_custom_tag_code(tag.tag_type_code)


def _has_comment(tag: Tag) -> bool:
    return bool(tag.comment and tag.comment.strip())


def drop_empty_custom_tags(tags: Iterable[Tag]) -> list[Tag]:
    """Remove custom tags without a usable comment. Standard tags always stay."""
    return [tag for tag in tags if not is_custom(tag) or _has_comment(tag)]


def summarize_tags(tags: list[Tag]) -> TagMetadata:
    custom = sum(1 for tag in tags if is_custom(tag))
    return TagMetadata(
        standard_tags=len(tags) - custom,
        custom_tags=custom,
        note=TAG_METADATA_NOTE,
    )


def matches_keyword(tag: Tag, keyword: str) -> bool:
    """Case-insensitive substring match on ``custom_name`` or ``comment``."""
    needle = keyword.lower()
    return any(
        needle in field.lower()
        for field in (tag.custom_name, tag.comment)
        if field
    )


def process_tags(response: TagResponse, keyword: str | None = None) -> TagResponse:
    """Filter noise, attach counts, then apply the optional keyword filter.

    The counts in ``tagMetadata`` describe the tags left after noise
    filtering; the keyword filter runs afterwards and does not update them.
    A response without ``data`` is returned as is.
    """
    if response.data is None:
        return response

    tags = drop_empty_custom_tags(response.data)
    metadata = summarize_tags(tags)
    if keyword:
        tags = [tag for tag in tags if matches_keyword(tag, keyword)]

    return response.model_copy(update={"data": tags, "tag_metadata": metadata})
