from .cartodb_exceptions import (
    CartoDBTilesException,
    ConfigLoadError,
    ConfigurationError,
    MissingCredentialsError,
    RemoteRejectedError,
    RemoteResponseError,
    RemoteUnavailableError,
    TransportError,
    UnexpectedResponseError,
    UnsupportedSchemeError,
    ValidationError,
)

__all__ = [
    'CartoDBTilesException',
    'ConfigLoadError',
    'ConfigurationError',
    'MissingCredentialsError',
    'RemoteRejectedError',
    'RemoteResponseError',
    'RemoteUnavailableError',
    'TransportError',
    'UnexpectedResponseError',
    'UnsupportedSchemeError',
    'ValidationError',
]
