RESPONSE_DELIMITER = "------------------------"


def split_response(text: str) -> list[str]:
    """Split a raw response body into candidate fragments.

    Purely textual: empty fragments from leading or trailing delimiters are
    kept and left for the parser to discard.
    """
    return text.split(RESPONSE_DELIMITER)
