from functools import wraps
from typing import ParamSpec, TypeVar, Callable, Awaitable, Concatenate

from httpx import AsyncClient, Response, HTTPError
from loguru import logger

P = ParamSpec("P")
T = TypeVar("T")
S = TypeVar("S", bound="RemoteService")


class StoreRequestError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteService:
    def __init__(self, base_url: str, timeout: float = 10) -> None:
        self.base_url = base_url
        self.timeout = timeout

    def client(self) -> AsyncClient:
        return AsyncClient(base_url=self.base_url, timeout=self.timeout)

    @staticmethod
    def check_response(resp: Response, action: str) -> Response:
        logger.debug(f"{action} response, code={resp.status_code!r}, body={resp.text[:256]!r}")

        if resp.status_code >= 400:
            logger.error(f"{action} failed, code={resp.status_code!r}, body={resp.text[:256]!r}")
            raise StoreRequestError(f"{action} failed with status {resp.status_code}", resp.status_code)

        return resp


def with_httpx(
        func: Callable[Concatenate[S, AsyncClient, P], Awaitable[T]]
) -> Callable[Concatenate[S, P], Awaitable[T]]:
    @wraps(func)
    async def httpx_wrapper(self: S, *args: P.args, **kwargs: P.kwargs) -> T:
        try:
            async with self.client() as client:
                return await func(self, client, *args, **kwargs)
        except HTTPError as e:
            logger.opt(exception=e).error(f"Request to {self.base_url} failed")
            raise StoreRequestError(f"Request to {self.base_url} failed: {e.__class__.__name__}") from e
        except (ValueError, KeyError) as e:
            # 2xx response with a body that is not the expected json (proxy or captive pages)
            logger.opt(exception=e).error(f"Unexpected response from {self.base_url}")
            raise StoreRequestError(f"Unexpected response from {self.base_url}") from e

    return httpx_wrapper
