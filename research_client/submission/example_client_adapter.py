"""Offline analysis client.

Returns a fixed response shaped like the real webhook output: fenced JSON
fragments joined by the response delimiter. Useful for local development and
as a template for new transports.
"""

import json
from typing import ClassVar

from research_client.parsing.splitter import RESPONSE_DELIMITER
from research_client.submission.client_base import BaseAnalysisClient


class ExampleClientAdapter(BaseAnalysisClient):
    """Answers every submission with one analysis per requested product line."""

    DEFAULT_ANALYSIS: ClassVar[dict[str, object]] = {
        "companyName": "Example Co",
        "summary": "Offline example analysis.",
        "products": [],
    }

    def submit(self, payload: dict[str, object]) -> str:
        product_lines = payload.get("productLines") or []
        if not isinstance(product_lines, list) or not product_lines:
            return "```json\n" + json.dumps(self.DEFAULT_ANALYSIS) + "\n```"
        fragments = [
            "```json\n"
            + json.dumps({**self.DEFAULT_ANALYSIS, "companyName": str(line)})
            + "\n```"
            for line in product_lines
        ]
        return RESPONSE_DELIMITER.join(fragments)
