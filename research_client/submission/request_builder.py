"""Bounds user inputs before they are sent to the analysis service."""

from research_client.submission.models import DocumentInput, RawInputSet, RequestPayload

TRUNCATION_SUFFIX = "... (content truncated)"
MAX_DOCUMENT_CHARS = 50_000
MAX_LIST_ENTRIES = 10


def is_submittable(raw: RawInputSet) -> bool:
    """At least one source (document or blog link) and at least one product line."""
    return (bool(raw.documents) or bool(raw.blog_links)) and bool(raw.product_lines)


def build_request(
    raw: RawInputSet,
    *,
    max_document_chars: int = MAX_DOCUMENT_CHARS,
    max_list_entries: int = MAX_LIST_ENTRIES,
) -> RequestPayload:
    """Truncate oversized documents and cap link/product lists.

    Never raises; excess entries are dropped silently and the first
    ``max_list_entries`` keep their original order.
    """
    return RequestPayload(
        documents=[_truncate(doc, max_document_chars) for doc in raw.documents],
        blog_links=list(raw.blog_links[:max_list_entries]),
        product_lines=list(raw.product_lines[:max_list_entries]),
    )


def _truncate(doc: DocumentInput, limit: int) -> DocumentInput:
    if len(doc.content) <= limit:
        return doc
    return DocumentInput(
        name=doc.name,
        content=doc.content[:limit] + TRUNCATION_SUFFIX,
        type=doc.type,
    )
