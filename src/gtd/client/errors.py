"""Client-side request errors."""


class ClientError(Exception):
    """Base class for failed API calls."""


class TransportError(ClientError):
    """The request never produced a usable response (network, timeout, bad body)."""


class ResponseError(ClientError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"HTTP {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail
