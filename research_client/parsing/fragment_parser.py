"""Best-effort decoding of response fragments.

Each fragment is decoded on its own; a broken fragment is logged and dropped
so the remaining fragments still produce results.
"""

import json
from collections.abc import Iterable

from research_client.logging.logger import Log

_FENCE_MARKERS = ("```json", "```")


def clean_fragment(fragment: str) -> str:
    """Remove code-fence markers anywhere in the fragment and trim whitespace."""
    cleaned = fragment
    for marker in _FENCE_MARKERS:
        cleaned = cleaned.replace(marker, "")
    return cleaned.strip()


def parse_fragment(fragment: str) -> object | None:
    """Decode one fragment, returning None when it is not valid JSON."""
    cleaned = clean_fragment(fragment)
    try:
        return json.loads(cleaned)
    except (json.JSONDecodeError, RecursionError) as exc:
        Log.warning(f"Failed to parse response fragment: {exc}")
        return None


def parse_fragments(fragments: Iterable[str]) -> list[object]:
    values: list[object] = []
    for fragment in fragments:
        value = parse_fragment(fragment)
        if value is not None:
            values.append(value)
    return values
