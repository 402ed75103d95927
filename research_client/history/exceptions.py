class HistoryError(Exception):
    """Raised when research history cannot be loaded, saved or deleted."""


class HistoryEntryNotFoundError(HistoryError):
    """Raised when a history entry id does not exist."""
