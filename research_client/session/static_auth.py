from collections.abc import Callable

from research_client.session.auth_base import BaseAuthProvider, SessionListener


class StaticAuthProvider(BaseAuthProvider):
    """In-process auth provider holding a session set by the caller.

    Stands in for a real identity service in local runs and tests.
    """

    def __init__(self, session: object | None = None) -> None:
        self._session = session
        self._listeners: list[SessionListener] = []

    def current_session(self) -> object | None:
        return self._session

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_session(self, session: object | None) -> None:
        self._session = session
        for listener in list(self._listeners):
            listener(session)
