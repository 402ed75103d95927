"""Maps decoded fragments to ProductAnalysis records (never an empty list)."""

from collections.abc import Iterable, Mapping
from typing import Any

from research_client.logging.logger import Log
from research_client.parsing.models import COMPANY_NAME_KEY, ProductAnalysis
from research_client.submission.exceptions import MalformedResponseError

_IDENTITY_KEYS = (COMPANY_NAME_KEY, "company_name", "company")
PLACEHOLDER_NAME = "Unknown Company {index}"
FALLBACK_COMPANY_NAME = "Analysis Unavailable"
FALLBACK_SUMMARY = (
    "The analysis service replied, but no analysis could be read from its response."
)


def fallback_record() -> ProductAnalysis:
    return ProductAnalysis(
        company_name=FALLBACK_COMPANY_NAME,
        data={"summary": FALLBACK_SUMMARY},
        is_fallback=True,
    )


def normalize_results(
    values: Iterable[object],
    *,
    allow_fallback: bool = True,
) -> list[ProductAnalysis]:
    """Turn decoded JSON values into records.

    Objects become one record each; arrays contribute their object elements;
    scalars are dropped. Objects without a company name get a numbered
    placeholder name. When nothing survives, a single fallback record is
    returned, or MalformedResponseError is raised if fallback is disabled.
    """
    records: list[ProductAnalysis] = []
    placeholders = 0
    for value in values:
        for candidate in _candidates(value):
            key, name = _identity(candidate)
            if name is None:
                placeholders += 1
                name = PLACEHOLDER_NAME.format(index=placeholders)
                Log.warning(f"Analysis without company name, using '{name}'")
            records.append(
                ProductAnalysis(company_name=name, data=_payload(candidate, key))
            )

    if records:
        Log.info(f"Normalized {len(records)} analysis records")
        return records
    if not allow_fallback:
        raise MalformedResponseError("No valid JSON objects found in response")
    Log.warning("No analysis records recovered, returning fallback record")
    return [fallback_record()]


def _candidates(value: object) -> list[Mapping[str, Any]]:
    if isinstance(value, Mapping):
        return [value]
    if isinstance(value, list):
        items = [item for item in value if isinstance(item, Mapping)]
        if len(items) < len(value):
            Log.warning(f"Dropped {len(value) - len(items)} non-object array entries")
        return items
    Log.warning(f"Dropped non-object fragment value of type {type(value).__name__}")
    return []


def _identity(raw: Mapping[str, Any]) -> tuple[str | None, str | None]:
    for key in _IDENTITY_KEYS:
        name = raw.get(key)
        if isinstance(name, str) and name.strip():
            return key, name
    return None, None


def _payload(raw: Mapping[str, Any], identity_key: str | None) -> dict[str, Any]:
    return {k: v for k, v in raw.items() if k != identity_key}
