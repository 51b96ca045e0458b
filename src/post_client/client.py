# src/post_client/client.py
import time
import uuid
from typing import Any, Callable, Dict, List, Optional, TypeVar

import requests

from .core.codec import PostCodec
from .core.config import PostClientConfig
from .core.exceptions import HTTPStatusError, PostClientException, classify_requests_exception
from .core.logging import PostClientLogger, logger_name_for
from .core.logging.filters import clear_correlation_id, set_correlation_id
from .models import Post
from .result import FetchResult

T = TypeVar("T")


class PostClient:
    """
    Синхронный клиент ресурса posts.

    Один вызов = один GET запрос. Клиент не хранит состояния между вызовами:
    сессия requests и кодек создаются один раз и переиспользуются.

    Lifecycle: создать при старте, передавать по ссылке, закрыть в конце.

    Example:
        >>> with PostClient() as client:
        ...     posts = client.fetch_all_posts()
        ...     first = client.fetch_post(1)
    """

    def __init__(
        self,
        config: Optional[PostClientConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            config: PostClientConfig (по умолчанию jsonplaceholder, без таймаута)
            session: Готовая requests.Session; закрывать её будет владелец
        """
        self._config = config or PostClientConfig()
        self._codec = PostCodec()
        self._owns_session = session is None
        self._session = session if session is not None else self._create_session()

        self._logger: Optional[PostClientLogger] = None
        if self._config.logging:
            self._logger = PostClientLogger(
                config=self._config.logging,
                name=logger_name_for(self._config.base_url)
            )

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        if self._config.headers:
            session.headers.update(self._config.headers)
        session.verify = self._config.verify_ssl
        return session

    # ==================== Управление жизненным циклом ====================

    def __enter__(self) -> "PostClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self):
        """
        Закрывает логгер и сессию (если клиент её создал). Идемпотентно.
        """
        if self._logger is not None:
            self._logger.close()
        if self._owns_session:
            self._session.close()

    @property
    def config(self) -> PostClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def codec(self) -> PostCodec:
        """Кодек клиента (для сериализации полученных постов)."""
        return self._codec

    # ==================== Операции ====================

    def fetch_all_posts(self) -> List[Post]:
        """
        GET <base_url>: все посты в порядке сервера.

        Raises:
            TransportError: Запрос не завершился
            DecodeError: Тело не является JSON массивом постов
            HTTPStatusError: Не-2xx ответ (только при raise_for_status=True)
        """
        return self._fetch(self.base_url, self._codec.decode_posts)

    def fetch_post(self, post_id: int) -> Post:
        """
        GET <base_url>/<post_id>: один пост.

        post_id подставляется в путь как есть, без проверки диапазона.

        Raises:
            TransportError: Запрос не завершился
            DecodeError: Тело не является объектом поста (в т.ч. тело 404)
            HTTPStatusError: Не-2xx ответ (только при raise_for_status=True)
        """
        return self._fetch(f"{self.base_url}/{post_id}", self._codec.decode_post)

    def try_fetch_all_posts(self) -> FetchResult[List[Post]]:
        """fetch_all_posts() без исключений: ошибка возвращается в FetchResult."""
        return self._try(self.fetch_all_posts)

    def try_fetch_post(self, post_id: int) -> FetchResult[Post]:
        """fetch_post() без исключений: ошибка возвращается в FetchResult."""
        return self._try(lambda: self.fetch_post(post_id))

    # ==================== Внутренние методы ====================

    @staticmethod
    def _try(operation: Callable[[], T]) -> FetchResult[T]:
        try:
            return FetchResult.success(operation())
        except PostClientException as e:
            return FetchResult.failure(e)

    def _fetch(self, url: str, decode: Callable[..., T]) -> T:
        correlation_id = str(uuid.uuid4())
        start_time = time.time()

        if self._logger:
            set_correlation_id(correlation_id)
            self._logger.info("Request started", method="GET", url=url)

        try:
            response = self._send(url)
            result = self._decode(response, url, decode)

            if self._logger:
                self._logger.info(
                    "Request completed",
                    method="GET",
                    url=url,
                    status_code=response.status_code,
                    duration_ms=round((time.time() - start_time) * 1000, 2),
                    response_size=len(response.content),
                )
            return result
        except PostClientException as e:
            if self._logger:
                self._logger.error(
                    "Request failed",
                    method="GET",
                    url=url,
                    error=str(e),
                    error_type=type(e).__name__,
                    duration_ms=round((time.time() - start_time) * 1000, 2),
                )
            raise
        finally:
            if self._logger:
                clear_correlation_id()

    def _send(self, url: str) -> requests.Response:
        kwargs: Dict[str, Any] = {}
        if self._config.timeout is not None:
            kwargs['timeout'] = self._config.timeout.as_tuple()

        try:
            return self._session.get(url, **kwargs)
        except requests.exceptions.RequestException as e:
            raise classify_requests_exception(e, url) from e

    def _decode(self, response: requests.Response, url: str, decode: Callable[..., T]) -> T:
        if self._logger:
            self._logger.debug(
                "Response received",
                status_code=response.status_code,
                content_type=response.headers.get('Content-Type'),
            )

        if self._config.raise_for_status and not 200 <= response.status_code < 300:
            raise HTTPStatusError(response.status_code, url, response.text[:200])

        return decode(response.content, url=url, status_code=response.status_code)
