import asyncio
import json
from functools import wraps

import aiohttp
from pydantic import ValidationError


class APIRequestError(Exception):
    def __init__(self, message: str, source: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.source = source


class SendableAPIRequestError(APIRequestError):
    def __init__(self, message: str, source: Exception | None = None):
        super().__init__(message, source)


class TransportError(APIRequestError):
    """The request never completed (connection, DNS, TLS, timeout)"""


class DecodeError(APIRequestError):
    def __init__(self, message: str, field: str | None = None, source: Exception | None = None):
        super().__init__(message, source)
        self.field = field


class RemoteError(SendableAPIRequestError):
    def __init__(self, message: str, code: str, source: Exception | None = None):
        super().__init__(message, source)
        self.code = code


class NotFoundError(SendableAPIRequestError):
    pass


def _error_field(error: ValidationError) -> str | None:
    errors = error.errors()
    if len(errors) == 0 or not errors[0]["loc"]:
        return None
    return ".".join(str(part) for part in errors[0]["loc"])


def aiohttp_error_handler(func):
    @wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except aiohttp.ClientConnectionError as e:
            raise TransportError("Unable to contact ICNDB", e)
        except aiohttp.ClientResponseError as e:
            if e.status == 404:
                raise NotFoundError(f"No joke found (status: {e.status})", e)
            raise RemoteError(f"An api request failed: {e.message} (status: {e.status})", str(e.status), e)
        except aiohttp.ClientPayloadError as e:
            raise TransportError("Payload error", e)
        except asyncio.TimeoutError as e:
            raise TransportError("Request timed out. Try again later", e)
        except ValidationError as e:
            field = _error_field(e)
            raise DecodeError(f"Unable to decode response (field: {field})", field, e)
        except UnicodeDecodeError as e:
            raise DecodeError("Response is not valid UTF-8", source=e)
        except json.JSONDecodeError as e:
            raise DecodeError("Response is not valid JSON", source=e)
        # Propagate already handled exception
        except APIRequestError as e:
            raise e
        except Exception as e:
            raise APIRequestError("An unexpected error occurred", e)

    return wrapper
