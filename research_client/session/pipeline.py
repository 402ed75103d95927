from research_client.config.settings import Settings
from research_client.logging.logger import Log
from research_client.parsing.fragment_parser import parse_fragments
from research_client.parsing.models import ProductAnalysis
from research_client.parsing.normalizer import normalize_results
from research_client.parsing.splitter import split_response
from research_client.submission.client_base import BaseAnalysisClient
from research_client.submission.factory import AnalysisClientFactory
from research_client.submission.models import RawInputSet
from research_client.submission.request_builder import (
    MAX_DOCUMENT_CHARS,
    MAX_LIST_ENTRIES,
    build_request,
)


def ingest_response(text: str, *, allow_fallback: bool = True) -> list[ProductAnalysis]:
    """Split -> parse -> normalize a raw response body."""
    fragments = split_response(text)
    Log.info(f"Found {len(fragments)} fragments separated by delimiter")
    values = parse_fragments(fragments)
    Log.info(f"Successfully parsed {len(values)} of {len(fragments)} fragments")
    return normalize_results(values, allow_fallback=allow_fallback)


class AnalysisPipeline:
    """Runs one submission end to end.

    Pipeline: build request -> call service -> split -> parse -> normalize.
    Transport errors propagate; parsing problems are recovered per fragment.
    """

    def __init__(
        self,
        client: BaseAnalysisClient,
        *,
        max_document_chars: int = MAX_DOCUMENT_CHARS,
        max_list_entries: int = MAX_LIST_ENTRIES,
        allow_fallback: bool = True,
    ) -> None:
        self._client = client
        self._max_document_chars = max_document_chars
        self._max_list_entries = max_list_entries
        self._allow_fallback = allow_fallback

    def run(self, raw: RawInputSet) -> list[ProductAnalysis]:
        payload = build_request(
            raw,
            max_document_chars=self._max_document_chars,
            max_list_entries=self._max_list_entries,
        )
        Log.info(
            f"Submitting {len(payload.documents)} documents, "
            f"{len(payload.blog_links)} blog links, "
            f"{len(payload.product_lines)} product lines"
        )

        body = self._client.submit(payload.to_dict())
        Log.debug(f"Analysis raw response:\n{body}")

        return ingest_response(body, allow_fallback=self._allow_fallback)

    def close(self) -> None:
        self._client.close()


def build_pipeline(settings: Settings) -> AnalysisPipeline:
    """Build an AnalysisPipeline with the configured client."""
    return AnalysisPipeline(
        AnalysisClientFactory.create(settings),
        max_document_chars=settings.max_document_chars,
        max_list_entries=settings.max_list_entries,
        allow_fallback=settings.allow_fallback_record,
    )
