from research_client.parsing.fragment_parser import parse_fragment, parse_fragments
from research_client.parsing.models import ProductAnalysis
from research_client.parsing.normalizer import normalize_results
from research_client.parsing.splitter import RESPONSE_DELIMITER, split_response

__all__ = [
    "RESPONSE_DELIMITER",
    "ProductAnalysis",
    "normalize_results",
    "parse_fragment",
    "parse_fragments",
    "split_response",
]
