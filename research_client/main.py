import json
import sys
from pathlib import Path

from research_client.config.settings import Settings
from research_client.database.connection import close_pool, init_pool
from research_client.history.research_results_repository import ResearchResultsRepository
from research_client.logging.logger import Log
from research_client.session.pipeline import AnalysisPipeline, build_pipeline
from research_client.session.research_session import ResearchSession
from research_client.session.static_auth import StaticAuthProvider
from research_client.submission.exceptions import InvalidInputError
from research_client.submission.models import DocumentInput


def load_inputs(session: ResearchSession, path: Path) -> None:
    """Fill the session inputs from a JSON file shaped like the request payload.

    Raises:
        OSError: if the file cannot be read.
        ValueError: if the file is not valid JSON.
        InvalidInputError: if the JSON is not shaped like the request payload.
    """
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise InvalidInputError("Inputs file must contain a JSON object")
    documents = raw.get("documents", [])
    if not isinstance(documents, list) or not all(isinstance(d, dict) for d in documents):
        raise InvalidInputError("'documents' must be a list of objects")
    session.set_documents([
        DocumentInput(
            name=doc.get("name", ""),
            content=doc.get("content", ""),
            type=doc.get("type", "text/plain"),
        )
        for doc in documents
    ])
    session.set_blog_links(list(raw.get("blogLinks", [])))
    session.set_product_lines(list(raw.get("productLines", [])))


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> pool -> session -> submit one inputs file."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: research-client INPUTS.json", file=sys.stderr)
        return 2

    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)
    pipeline: AnalysisPipeline | None = None

    try:
        pipeline = build_pipeline(settings)
        session = ResearchSession(
            pipeline,
            ResearchResultsRepository(),
            StaticAuthProvider(session="local"),
        )
        session.attach()
        try:
            load_inputs(session, Path(args[0]))
            outcome = session.submit()
        except (OSError, ValueError, InvalidInputError) as exc:
            Log.error(f"Invalid inputs: {exc}")
            return 2
        finally:
            session.detach()

        print(outcome.message)
        for record in outcome.records:
            print(json.dumps(record.to_dict(), ensure_ascii=False))
        if outcome.success:
            if any(record.is_fallback for record in outcome.records):
                Log.warning("Fallback result not saved to research history")
            else:
                saved = session.save_results()
                if saved.success:
                    Log.info(saved.message)
                else:
                    Log.error(saved.message)
        return 0 if outcome.success else 1
    finally:
        if pipeline is not None:
            pipeline.close()
        close_pool()


if __name__ == "__main__":
    sys.exit(main())
