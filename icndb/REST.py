from typing import Any, Iterable

import aiohttp
from pydantic import StrictInt, StrictStr, TypeAdapter

from .exceptions import aiohttp_error_handler, APIRequestError, DecodeError, NotFoundError, RemoteError
from .logger import logger
from .models import ApiResponse, Joke


__all__ = ("ApiClient",)


ENDPOINT = "http://api.icndb.com"
TIMEOUT = aiohttp.ClientTimeout(total=7)
HEADERS = {"Accept": "application/json"}

NOT_FOUND_TYPES = ("NoSuchQuoteException", "NoSuchCategoryException")

JOKE = TypeAdapter(Joke)
JOKES = TypeAdapter(list[Joke])
CATEGORIES = TypeAdapter(list[StrictStr])
COUNT = TypeAdapter(StrictInt)


def category_list(categories: str | Iterable[str]) -> str:
    if isinstance(categories, str):
        categories = [categories]
    return f"[{','.join(sorted(categories))}]"


def lookup_params(
    categories: str | Iterable[str] | None = None,
    first_name: str | None = None,
    last_name: str | None = None,
    exclude: str | Iterable[str] | None = None,
) -> dict[str, str]:
    """Only the arguments that were given end up in the query,
    an empty name would otherwise replace Chuck Norris with nothing"""
    params = {}
    if first_name is not None:
        params["firstName"] = first_name
    if last_name is not None:
        params["lastName"] = last_name
    if categories:
        params["limitTo"] = category_list(categories)
    if exclude:
        params["exclude"] = category_list(exclude)
    return params


class ApiClient:
    """Client for the Internet Chuck Norris Database.

    Construction does no network activity. Without an injected session every
    call opens its own and closes it before returning.
    """

    def __init__(
        self,
        *,
        endpoint: str = ENDPOINT,
        timeout: aiohttp.ClientTimeout = TIMEOUT,
        session: aiohttp.ClientSession | None = None,
    ):
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout
        self.session = session

    async def get_by_id(self, id: int, first_name: str | None = None, last_name: str | None = None) -> Joke:
        params = lookup_params(first_name=first_name, last_name=last_name)
        return await self._get(f"/jokes/{id}", params, JOKE)

    async def get_random(
        self,
        categories: str | Iterable[str] | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        exclude: str | Iterable[str] | None = None,
    ) -> Joke:
        params = lookup_params(categories, first_name, last_name, exclude)
        return await self._get("/jokes/random", params, JOKE)

    async def get_random_many(
        self,
        count: int,
        categories: str | Iterable[str] | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        exclude: str | Iterable[str] | None = None,
    ) -> list[Joke]:
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        params = lookup_params(categories, first_name, last_name, exclude)
        return await self._get(f"/jokes/random/{count}", params, JOKES)

    async def get_categories(self) -> list[str]:
        return await self._get("/categories", {}, CATEGORIES)

    async def get_count(self) -> int:
        return await self._get("/jokes/count", {}, COUNT)

    async def _get(self, path: str, params: dict[str, str], adapter: TypeAdapter) -> Any:
        url = f"{self.endpoint}{path}"
        logger.debug("GET %s %s", url, params)
        try:
            return await self._request(url, params, adapter)
        except APIRequestError as e:
            logger.warning("GET %s failed: %s", url, e.message)
            raise

    @aiohttp_error_handler
    async def _request(self, url: str, params: dict[str, str], adapter: TypeAdapter) -> Any:
        if self.session is not None:
            return await self._fetch(self.session, url, params, adapter)
        async with aiohttp.ClientSession(timeout=self.timeout, headers=HEADERS) as session:
            return await self._fetch(session, url, params, adapter)

    async def _fetch(self, session: aiohttp.ClientSession, url: str, params: dict[str, str], adapter: TypeAdapter) -> Any:
        async with session.get(url, params=params, headers=HEADERS, timeout=self.timeout, raise_for_status=True) as resp:
            # ICNDB does not always label its json as such
            response = ApiResponse.model_validate(await resp.json(content_type=None))

        if response.type == "success":
            if response.value is None:
                raise DecodeError("Response is missing its value", "value")
            return adapter.validate_python(response.value)

        if isinstance(response.value, str):
            message = response.value
        else:
            message = f"ICNDB returned {response.type}"
        if response.type in NOT_FOUND_TYPES:
            raise NotFoundError(message)
        raise RemoteError(message, response.type)
