from typing import Any, Optional


class CartoDBTilesException(Exception):
    """Base exception for cartodb tiles"""
    pass


class ConfigurationError(CartoDBTilesException):
    """Settings file related errors"""
    pass


class ConfigLoadError(CartoDBTilesException):
    """Named map configuration document could not be loaded"""
    pass


class ValidationError(CartoDBTilesException):
    """Validation related errors"""
    pass


class MissingCredentialsError(ValidationError):
    """Username or API key missing after applying defaults"""
    pass


class UnsupportedSchemeError(CartoDBTilesException):
    """Connection string scheme has no registered handler"""

    def __init__(self, scheme: str, message: Optional[str] = None):
        self.scheme = scheme
        super().__init__(message or f"Protocol '{scheme}:' is not supported")


class TransportError(CartoDBTilesException):
    """Request never produced an HTTP response (DNS, refused, timeout)"""

    def __init__(self, method: str, uri: str, message: str):
        self.method = method
        self.uri = uri
        super().__init__(f"{method} {uri} failed: {message}")


class RemoteResponseError(CartoDBTilesException):
    """The Maps API answered with a non-200 status"""

    def __init__(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body
        super().__init__(f"{self.describe()} ({status_code}): {body}")

    def describe(self) -> str:
        return "Maps API returned an error"


class RemoteRejectedError(RemoteResponseError):
    """4xx: the request was rejected"""

    def describe(self) -> str:
        return "Maps API rejected the request"


class RemoteUnavailableError(RemoteResponseError):
    """5xx: the Maps API failed"""

    def describe(self) -> str:
        return "Maps API is unavailable"


class UnexpectedResponseError(RemoteResponseError):
    """Any other status, or a 200 missing expected fields"""

    def describe(self) -> str:
        return "Unexpected response from Maps API"
