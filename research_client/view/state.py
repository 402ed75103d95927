from enum import Enum

RESULTS_STEP = 4


class ViewState(str, Enum):
    """Top-level screen; exactly one is active."""

    AUTH = "auth"
    MAIN = "main"
    HISTORY = "history"
    RESULTS = "results"


def derive_view_state(
    session_present: bool,
    history_open: bool,
    step: int,
    result_count: int,
) -> ViewState:
    """Map the session signals to the active view.

    Precedence: missing session, then open history panel, then results
    (terminal step with at least one record). Defined for every input.
    """
    if not session_present:
        return ViewState.AUTH
    if history_open:
        return ViewState.HISTORY
    if step == RESULTS_STEP and result_count > 0:
        return ViewState.RESULTS
    return ViewState.MAIN
