"""In-memory state of one user's research session."""

import threading
from collections.abc import Callable

from research_client.history.exceptions import HistoryError
from research_client.history.models import HistoryEntry
from research_client.history.reconciler import find_existing
from research_client.history.repository_base import BaseHistoryRepository
from research_client.logging.logger import Log
from research_client.parsing.models import ProductAnalysis
from research_client.session.auth_base import BaseAuthProvider
from research_client.session.models import OperationOutcome, SubmissionOutcome
from research_client.session.pipeline import AnalysisPipeline
from research_client.submission.exceptions import (
    InvalidInputError,
    SubmissionError,
    SubmissionInProgressError,
)
from research_client.submission.messages import SUCCESS_MESSAGE, describe_failure
from research_client.submission.models import DocumentInput, RawInputSet
from research_client.submission.request_builder import is_submittable
from research_client.view.state import RESULTS_STEP, ViewState, derive_view_state

FIRST_STEP = 1

LOAD_FAILED_MESSAGE = "Failed to load research history"
DELETE_FAILED_MESSAGE = "Failed to delete research result"
DELETE_SUCCESS_MESSAGE = "Research result deleted successfully"
SAVE_FAILED_MESSAGE = "Failed to save research result"
SAVE_SUCCESS_MESSAGE = "Research result saved successfully"
NOTHING_TO_SAVE_MESSAGE = "There are no results to save"


class ResearchSession:
    """Owns inputs, results and history; the view is derived on every read.

    Only one submission may be outstanding at a time. Results and step are
    replaced only after a submission succeeds, and history is changed only
    after the repository confirms the change.
    """

    def __init__(
        self,
        pipeline: AnalysisPipeline,
        history_repo: BaseHistoryRepository,
        auth: BaseAuthProvider,
    ) -> None:
        self._pipeline = pipeline
        self._history_repo = history_repo
        self._auth = auth
        self._submit_lock = threading.Lock()
        self._unsubscribe: Callable[[], None] | None = None

        self._session: object | None = None
        self._history_open = False
        self._step = FIRST_STEP
        self._documents: list[DocumentInput] = []
        self._blog_links: list[str] = []
        self._product_lines: list[str] = []
        self._results: list[ProductAnalysis] = []
        self._history: list[HistoryEntry] = []

    # Auth wiring

    def attach(self) -> None:
        """Read the current auth session and follow its changes."""
        self._unsubscribe = self._auth.subscribe(self._on_session_change)
        self._on_session_change(self._auth.current_session())

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_session_change(self, session: object | None) -> None:
        Log.info(f"Auth session changed (signed in: {session is not None})")
        self._session = session
        if session is None:
            self._history = []
            return
        self.load_history()

    # Read-only state

    @property
    def view(self) -> ViewState:
        return derive_view_state(
            self._session is not None,
            self._history_open,
            self._step,
            len(self._results),
        )

    @property
    def step(self) -> int:
        return self._step

    @property
    def results(self) -> list[ProductAnalysis]:
        return list(self._results)

    @property
    def history(self) -> list[HistoryEntry]:
        return list(self._history)

    @property
    def history_open(self) -> bool:
        return self._history_open

    @property
    def is_submitting(self) -> bool:
        return self._submit_lock.locked()

    @property
    def existing_id(self) -> str | None:
        """Id of the saved entry covering the same companies as the current results."""
        if not self._results:
            return None
        return find_existing(self._results, self._history)

    # Inputs

    def set_documents(self, documents: list[DocumentInput]) -> None:
        self._documents = list(documents)

    def set_blog_links(self, links: list[str]) -> None:
        self._blog_links = list(links)

    def set_product_lines(self, lines: list[str]) -> None:
        self._product_lines = list(lines)

    def inputs(self) -> RawInputSet:
        return RawInputSet(
            documents=list(self._documents),
            blog_links=list(self._blog_links),
            product_lines=list(self._product_lines),
        )

    def is_form_valid(self) -> bool:
        return is_submittable(self.inputs())

    # Submission

    def submit(self) -> SubmissionOutcome:
        """Run one analysis.

        Raises:
            SubmissionInProgressError: if another submission is outstanding.
            InvalidInputError: if the inputs cannot be submitted.
        """
        if not self._submit_lock.acquire(blocking=False):
            raise SubmissionInProgressError("A submission is already in progress")
        try:
            raw = self.inputs()
            if not is_submittable(raw):
                raise InvalidInputError(
                    "At least one document or blog link and one product line are required"
                )
            try:
                records = self._pipeline.run(raw)
            except SubmissionError as exc:
                Log.error(f"Submission error: {exc}")
                return SubmissionOutcome(success=False, message=describe_failure(exc))
            except Exception as exc:
                Log.error(f"Unexpected submission error: {exc!r}")
                return SubmissionOutcome(success=False, message=describe_failure(exc))

            self._results = records
            self._step = RESULTS_STEP
            Log.info(f"Analysis completed with {len(records)} records")
            return SubmissionOutcome(
                success=True,
                message=SUCCESS_MESSAGE,
                records=list(records),
                existing_id=find_existing(records, self._history),
            )
        finally:
            self._submit_lock.release()

    def start_new(self) -> None:
        self._step = FIRST_STEP
        self._documents = []
        self._blog_links = []
        self._product_lines = []
        self._results = []

    # History

    def open_history(self) -> OperationOutcome:
        self._history_open = True
        return self.load_history()

    def close_history(self) -> None:
        self._history_open = False

    def select_history_entry(self, entry: HistoryEntry) -> None:
        self._results = list(entry.data)
        self._step = RESULTS_STEP
        self._history_open = False

    def load_history(self) -> OperationOutcome:
        try:
            entries = self._history_repo.list_results()
        except HistoryError as exc:
            Log.error(f"Error loading research history: {exc}")
            return OperationOutcome(success=False, message=LOAD_FAILED_MESSAGE)
        self._history = entries
        Log.info(f"Research history loaded: {len(entries)} entries")
        return OperationOutcome(success=True, message="")

    def delete_history_entry(self, entry_id: str) -> OperationOutcome:
        try:
            self._history_repo.delete_result(entry_id)
        except HistoryError as exc:
            Log.error(f"Error deleting research result {entry_id}: {exc}")
            return OperationOutcome(success=False, message=DELETE_FAILED_MESSAGE)
        self._history = [entry for entry in self._history if entry.id != entry_id]
        return OperationOutcome(success=True, message=DELETE_SUCCESS_MESSAGE)

    def save_results(self, title: str | None = None) -> OperationOutcome:
        """Save the current results, updating the matching entry if one exists."""
        if not self._results:
            return OperationOutcome(success=False, message=NOTHING_TO_SAVE_MESSAGE)
        existing_id = self.existing_id
        title = title or default_title(self._results)
        try:
            entry_id = self._history_repo.save_or_update(existing_id, title, self._results)
        except HistoryError as exc:
            Log.error(f"Error saving research result: {exc}")
            return OperationOutcome(success=False, message=SAVE_FAILED_MESSAGE)
        action = "Updated" if existing_id is not None else "Created"
        Log.info(f"{action} research result {entry_id}")
        self.load_history()
        return OperationOutcome(success=True, message=SAVE_SUCCESS_MESSAGE)


def default_title(records: list[ProductAnalysis]) -> str:
    names = ", ".join(record.company_name for record in records)
    return f"Research: {names}"
