from abc import ABC, abstractmethod
from collections.abc import Callable

SessionListener = Callable[[object | None], None]


class BaseAuthProvider(ABC):
    """Contract for the authentication collaborator."""

    @abstractmethod
    def current_session(self) -> object | None:
        """Return the active session, or None when signed out."""

    @abstractmethod
    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register ``listener`` for session changes and return an unsubscribe callable."""
