from abc import ABC, abstractmethod


class BaseAnalysisClient(ABC):
    """Contract for analysis service transports."""

    @abstractmethod
    def submit(self, payload: dict[str, object]) -> str:
        """Send the request payload and return the raw response body.

        Args:
            payload: Wire representation of a RequestPayload.

        Returns:
            The response body as plain text, unparsed.

        Raises:
            TransportError: on network failure, timeout or non-2xx status.
        """

    def close(self) -> None:
        """Release transport resources. Stateless clients need not override."""
