"""End-to-end submission through the real pipeline and a mocked HTTP transport."""

import json
from collections.abc import Sequence

import httpx

from research_client.history.exceptions import HistoryError
from research_client.history.models import HistoryEntry
from research_client.history.repository_base import BaseHistoryRepository
from research_client.parsing.models import ProductAnalysis
from research_client.parsing.splitter import RESPONSE_DELIMITER
from research_client.session.pipeline import AnalysisPipeline
from research_client.session.research_session import ResearchSession
from research_client.session.static_auth import StaticAuthProvider
from research_client.submission.messages import MALFORMED_MESSAGE, RATE_LIMITED_MESSAGE
from research_client.submission.models import DocumentInput
from research_client.submission.webhook_client_adapter import WebhookClientAdapter
from research_client.view.state import ViewState


class InMemoryHistoryRepository(BaseHistoryRepository):
    def __init__(self) -> None:
        self.entries: list[HistoryEntry] = []
        self.fail_deletes = False

    def list_results(self) -> list[HistoryEntry]:
        return list(self.entries)

    def delete_result(self, entry_id: str) -> None:
        if self.fail_deletes:
            raise HistoryError("delete failed")
        self.entries = [e for e in self.entries if e.id != entry_id]

    def save_or_update(
        self,
        existing_id: str | None,
        title: str,
        records: Sequence[ProductAnalysis],
    ) -> str:
        entry_id = existing_id or f"entry-{len(self.entries) + 1}"
        self.entries = [e for e in self.entries if e.id != entry_id]
        self.entries.insert(0, HistoryEntry(id=entry_id, title=title, data=list(records)))
        return entry_id


def _session(
    handler,  # type: ignore[no-untyped-def]
    *,
    allow_fallback: bool = True,
) -> tuple[ResearchSession, InMemoryHistoryRepository]:
    client = WebhookClientAdapter(
        url="https://hook.example.test/analyze",
        timeout_seconds=5,
        transport=httpx.MockTransport(handler),
    )
    repo = InMemoryHistoryRepository()
    session = ResearchSession(
        AnalysisPipeline(client, allow_fallback=allow_fallback),
        repo,
        StaticAuthProvider(session="user-1"),
    )
    session.attach()
    session.set_documents([DocumentInput(name="brief.txt", content="d" * 2_000, type="text/plain")])
    session.set_product_lines(["Industrial sensors"])
    return session, repo


class TestSubmissionFlow:
    def test_malformed_fragment_is_dropped(self) -> None:
        body = '{"companyName":"Acme"}' + RESPONSE_DELIMITER + "not json"
        session, _repo = _session(lambda request: httpx.Response(200, text=body))

        assert session.view is ViewState.MAIN
        outcome = session.submit()

        assert outcome.success is True
        assert [r.company_name for r in session.results] == ["Acme"]
        assert session.view is ViewState.RESULTS

    def test_request_body_matches_inputs(self) -> None:
        seen: list[dict[str, object]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(json.loads(request.content))
            return httpx.Response(200, text='{"companyName": "Acme"}')

        session, _repo = _session(handler)
        session.submit()

        assert seen[0]["blogLinks"] == []
        assert seen[0]["productLines"] == ["Industrial sensors"]
        assert seen[0]["documents"] == [
            {"name": "brief.txt", "content": "d" * 2_000, "type": "text/plain"}
        ]

    def test_fenced_fragments(self) -> None:
        body = RESPONSE_DELIMITER.join([
            '```json\n{"companyName": "Acme", "score": 8}\n```',
            '```json\n{"companyName": "Beta", "score": 6}\n```',
        ])
        session, _repo = _session(lambda request: httpx.Response(200, text=body))

        session.submit()

        assert [(r.company_name, r.data["score"]) for r in session.results] == [
            ("Acme", 8),
            ("Beta", 6),
        ]

    def test_unparseable_body_yields_fallback_result(self) -> None:
        session, _repo = _session(lambda request: httpx.Response(200, text="<html>oops</html>"))

        outcome = session.submit()

        assert outcome.success is True
        assert len(session.results) == 1
        assert session.results[0].is_fallback is True
        assert session.view is ViewState.RESULTS

    def test_unparseable_body_without_fallback_is_reported(self) -> None:
        session, _repo = _session(
            lambda request: httpx.Response(200, text="<html>oops</html>"),
            allow_fallback=False,
        )

        outcome = session.submit()

        assert outcome.success is False
        assert outcome.message == MALFORMED_MESSAGE
        assert session.view is ViewState.MAIN

    def test_rate_limited(self) -> None:
        session, _repo = _session(lambda request: httpx.Response(429))

        outcome = session.submit()

        assert outcome.message == RATE_LIMITED_MESSAGE
        assert session.results == []

    def test_stream_error_is_reported_not_raised(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.StreamClosed()

        session, _repo = _session(handler)

        outcome = session.submit()

        assert outcome.success is False
        assert outcome.message.startswith("Error: Analysis service request failed")
        assert session.view is ViewState.MAIN

    def test_over_nested_fragment_keeps_valid_results(self) -> None:
        body = '{"companyName":"Acme"}' + RESPONSE_DELIMITER + "[" * 100_000
        session, _repo = _session(lambda request: httpx.Response(200, text=body))

        outcome = session.submit()

        assert outcome.success is True
        assert [r.company_name for r in session.results] == ["Acme"]

    def test_save_then_resubmit_matches_history(self) -> None:
        body = '{"companyName":"Acme"}' + RESPONSE_DELIMITER + '{"companyName":"Beta"}'
        session, repo = _session(lambda request: httpx.Response(200, text=body))
        session.submit()
        session.save_results()

        outcome = session.submit()

        assert outcome.existing_id == "entry-1"
        session.save_results()
        assert len(repo.entries) == 1

    def test_failed_delete_keeps_history(self) -> None:
        session, repo = _session(lambda request: httpx.Response(200, text='{"companyName":"Acme"}'))
        session.submit()
        session.save_results()
        repo.fail_deletes = True

        outcome = session.delete_history_entry("entry-1")

        assert outcome.success is False
        assert [e.id for e in session.history] == ["entry-1"]
