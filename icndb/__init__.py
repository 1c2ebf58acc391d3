from .REST import ApiClient
from .exceptions import (
    APIRequestError,
    DecodeError,
    NotFoundError,
    RemoteError,
    SendableAPIRequestError,
    TransportError,
)
from .logger import logger, setup_logger
from .models import ApiResponse, Joke


__all__ = (
    "ApiClient",
    "ApiResponse",
    "Joke",
    "APIRequestError",
    "SendableAPIRequestError",
    "TransportError",
    "DecodeError",
    "RemoteError",
    "NotFoundError",
    "logger",
    "setup_logger",
)
