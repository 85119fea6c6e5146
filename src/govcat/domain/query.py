"""Query engine for the service catalogue.

Pure functions over an in-memory sequence of `ServiceRecord`: free-text
filtering, tag filtering, newest-first ordering, and the related-services
ranking. Nothing here performs I/O or keeps state, so the functions are safe
to call concurrently.

Matching rules:

| operation          | fields                       | comparison                          |
|--------------------|------------------------------|-------------------------------------|
| `filter_by_query`  | name, description, owner     | case-insensitive substring          |
| `filter_by_tags`   | record tags                  | case-insensitive substring, any/any |
| `related`          | record tags                  | case-insensitive exact equality     |

The tag filter is deliberately looser than the related ranking: ``"med"``
finds a record tagged ``"medical"``, but only ``"medical"`` relates to it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .service_record import ServiceRecord

__all__ = [
    "RELATED_LIMIT",
    "filter_by_query",
    "filter_by_tags",
    "newest_first",
    "related",
    "search",
    "shared_tag_count",
]

#: Maximum number of records returned by `related`.
RELATED_LIMIT = 6


def _normalize_tags(tags: Iterable[str]) -> list[str]:
    """Trim and lower-case tags, dropping the ones left blank."""
    return [normalized for tag in tags if (normalized := tag.strip().lower())]


def _fold_tags(tags: Iterable[str]) -> list[str]:
    """Trim and lower-case tags, keeping blanks (an empty tag is a substring of any)."""
    return [tag.strip().lower() for tag in tags]


def filter_by_query(
    records: Sequence[ServiceRecord], query: str
) -> Sequence[ServiceRecord]:
    """Keep the records whose name, description or owner contains `query`.

    Args:
        records: Records to filter.
        query: Free text, matched as given (padding included).

    Returns:
        `records` itself when the query is blank (empty after trimming),
        otherwise a new list of the matching records in their original order.
    """
    if not query.strip():
        return records
    needle = query.lower()
    return [
        record
        for record in records
        if needle in record.name.lower()
        or needle in record.description.lower()
        or needle in record.owner.lower()
    ]


def filter_by_tags(
    records: Sequence[ServiceRecord], tags: Iterable[str]
) -> Sequence[ServiceRecord]:
    """Keep the records having a tag that contains any of `tags`.

    Args:
        records: Records to filter.
        tags: Wanted tags; each is trimmed and lower-cased. A tag left blank
            matches every tagged record.

    Returns:
        `records` itself when `tags` is empty, otherwise a new list of the
        matching records in their original order. A record without tags never
        matches a non-empty filter.
    """
    wanted = _fold_tags(tags)
    if not wanted:
        return records
    return [
        record
        for record in records
        if any(
            want in own_tag.lower() for own_tag in record.tags for want in wanted
        )
    ]


def search(
    records: Sequence[ServiceRecord], query: str, tags: Iterable[str]
) -> Sequence[ServiceRecord]:
    """Apply the text filter, then the tag filter (both predicates must hold)."""
    return filter_by_tags(filter_by_query(records, query), tags)


def newest_first(records: Iterable[ServiceRecord]) -> list[ServiceRecord]:
    """Sort records by `created_at`, newest first; ties keep their input order."""
    return sorted(records, key=lambda record: record.created_at, reverse=True)


def shared_tag_count(record: ServiceRecord, tags: Iterable[str]) -> int:
    """Count the distinct tags `record` shares with `tags` (case-insensitive)."""
    own = {tag.lower() for tag in record.tags}
    return len(own.intersection(_normalize_tags(tags)))


def related(
    records: Iterable[ServiceRecord],
    tags: Iterable[str],
    exclude_id: str | None,
    limit: int = RELATED_LIMIT,
) -> list[ServiceRecord]:
    """Rank the records sharing tags with `tags`, most shared tags first.

    Args:
        records: Candidate pool, in the order ties should be resolved.
        tags: Tag basis; trimmed, lower-cased, blanks ignored.
        exclude_id: ID of a record to leave out (usually the one being viewed).
            An ID that matches nothing excludes nothing.
        limit: Maximum number of records returned.

    Returns:
        Up to `limit` records sharing at least one tag by exact case-insensitive
        equality, sorted by shared-tag count descending. Equal scores keep the
        order of `records`. An empty tag basis yields an empty list.
    """
    basis = set(_normalize_tags(tags))
    if not basis:
        return []

    scored: list[tuple[int, ServiceRecord]] = []
    for record in records:
        if record.id == exclude_id:
            continue
        if score := shared_tag_count(record, basis):
            scored.append((score, record))

    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [record for _, record in scored[:limit]]
