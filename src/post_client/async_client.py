# src/post_client/async_client.py
"""
Асинхронный клиент ресурса posts на базе httpx.

Для asyncio приложений: каждая операция = один awaited GET запрос.
Таксономия ошибок и декодирование те же, что у PostClient.
"""

import time
import uuid
from typing import Awaitable, Callable, List, Optional, TypeVar

import httpx

from .core.codec import PostCodec
from .core.config import PostClientConfig
from .core.exceptions import HTTPStatusError, PostClientException, classify_httpx_exception
from .core.logging import PostClientLogger, logger_name_for
from .models import Post
from .result import FetchResult

T = TypeVar("T")


class AsyncPostClient:
    """
    Асинхронный клиент ресурса posts.

    Example:
        >>> async with AsyncPostClient() as client:
        ...     posts = await client.fetch_all_posts()
        ...     post = await client.fetch_post(1)

    Отмена: стандартная asyncio (task.cancel(), asyncio.wait_for) -
    собственного механизма нет.
    """

    def __init__(
        self,
        config: Optional[PostClientConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Args:
            config: PostClientConfig
            client: Готовый httpx.AsyncClient; закрывать его будет владелец
        """
        self._config = config or PostClientConfig()
        self._codec = PostCodec()
        self._client = client
        self._owns_client = client is None

        self._logger: Optional[PostClientLogger] = None
        if self._config.logging:
            self._logger = PostClientLogger(
                config=self._config.logging,
                name=logger_name_for(self._config.base_url)
            )

    def _get_client(self) -> httpx.AsyncClient:
        """Получить или создать httpx клиент."""
        if self._client is None:
            if self._config.timeout is not None:
                timeout = httpx.Timeout(
                    self._config.timeout.read,
                    connect=self._config.timeout.connect,
                )
            else:
                # requests-like: no client-side timeout
                timeout = httpx.Timeout(None)

            self._client = httpx.AsyncClient(
                timeout=timeout,
                verify=self._config.verify_ssl,
                headers=dict(self._config.headers),
            )
        return self._client

    async def __aenter__(self) -> "AsyncPostClient":
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Закрыть клиент и освободить ресурсы."""
        if self._logger is not None:
            self._logger.close()
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    @property
    def config(self) -> PostClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    # ==================== Операции ====================

    async def fetch_all_posts(self) -> List[Post]:
        """
        GET <base_url>: все посты в порядке сервера.

        Raises:
            TransportError, DecodeError, HTTPStatusError (см. PostClient)
        """
        return await self._fetch(self.base_url, self._codec.decode_posts)

    async def fetch_post(self, post_id: int) -> Post:
        """GET <base_url>/<post_id>: один пост."""
        return await self._fetch(f"{self.base_url}/{post_id}", self._codec.decode_post)

    async def try_fetch_all_posts(self) -> FetchResult[List[Post]]:
        return await self._try(self.fetch_all_posts)

    async def try_fetch_post(self, post_id: int) -> FetchResult[Post]:
        return await self._try(lambda: self.fetch_post(post_id))

    # ==================== Внутренние методы ====================

    @staticmethod
    async def _try(operation: Callable[[], Awaitable[T]]) -> FetchResult[T]:
        try:
            return FetchResult.success(await operation())
        except PostClientException as e:
            return FetchResult.failure(e)

    async def _fetch(self, url: str, decode: Callable[..., T]) -> T:
        # Thread-local correlation storage is not task-safe, so the ID
        # travels as an explicit log field here.
        correlation_id = str(uuid.uuid4())
        start_time = time.time()

        if self._logger:
            self._logger.info("Request started", method="GET", url=url, correlation_id=correlation_id)

        try:
            response = await self._send(url)

            if self._config.raise_for_status and not response.is_success:
                raise HTTPStatusError(response.status_code, url, response.text[:200])

            result = decode(response.content, url=url, status_code=response.status_code)
        except PostClientException as e:
            if self._logger:
                self._logger.error(
                    "Request failed",
                    method="GET",
                    url=url,
                    error=str(e),
                    error_type=type(e).__name__,
                    duration_ms=round((time.time() - start_time) * 1000, 2),
                    correlation_id=correlation_id,
                )
            raise

        if self._logger:
            self._logger.info(
                "Request completed",
                method="GET",
                url=url,
                status_code=response.status_code,
                duration_ms=round((time.time() - start_time) * 1000, 2),
                correlation_id=correlation_id,
            )
        return result

    async def _send(self, url: str) -> httpx.Response:
        client = self._get_client()
        try:
            return await client.get(url)
        except httpx.HTTPError as e:
            raise classify_httpx_exception(e, url) from e
