from typing import ClassVar

from research_client.config.settings import Settings
from research_client.submission.client_base import BaseAnalysisClient
from research_client.submission.example_client_adapter import ExampleClientAdapter
from research_client.submission.webhook_client_adapter import WebhookClientAdapter


class AnalysisClientFactory:
    """Creates the configured analysis client."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("example", "webhook")

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalysisClient:
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        if provider == "webhook":
            url = (settings.webhook_url or "").strip()
            if not url:
                raise ValueError("webhook_url is required for analysis_provider=webhook")
            return WebhookClientAdapter(
                url=url,
                timeout_seconds=settings.webhook_timeout_seconds,
            )
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
