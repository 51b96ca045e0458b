"""
Система конфигурации для Post Client.

Все конфиги immutable (frozen dataclasses): клиент создаётся один раз и
разделяется между вызовами.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Dict, Union, TYPE_CHECKING, Mapping
from types import MappingProxyType

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .logging import LoggingConfig


DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com/posts"

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Конфигурация таймаутов.

    Args:
        connect: Таймаут подключения (сек)
        read: Таймаут чтения данных (сек)

    Examples:
        >>> TimeoutConfig(connect=5, read=30)
    """
    connect: float = 5
    read: float = 30

    def __post_init__(self):
        """Валидация."""
        if self.connect <= 0:
            raise ConfigurationError("connect timeout must be positive")
        if self.read <= 0:
            raise ConfigurationError("read timeout must be positive")

    def as_tuple(self) -> Tuple[float, float]:
        """Вернуть как (connect, read) для requests."""
        return (self.connect, self.read)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# MAIN CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class PostClientConfig:
    """
    Главная конфигурация PostClient.

    Args:
        base_url: Корень ресурса posts (без завершающего слеша)
        headers: Статические заголовки (по умолчанию нет)
        timeout: Таймауты; None = поведение транспорта по умолчанию
        verify_ssl: Проверять SSL сертификаты
        raise_for_status: Считать не-2xx ответ ошибкой до декодирования
        logging: Конфигурация логирования (None = без логов)

    Examples:
        >>> config = PostClientConfig()
        >>> config = PostClientConfig.create(base_url="http://localhost:3000/posts", timeout=10)
    """
    base_url: str = DEFAULT_BASE_URL
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    timeout: Optional[TimeoutConfig] = None
    verify_ssl: bool = True
    raise_for_status: bool = False
    logging: Optional['LoggingConfig'] = None

    def __post_init__(self):
        """Normalize base_url and freeze headers."""
        if isinstance(self.headers, dict):
            object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"base_url must be an http(s) URL: {self.base_url!r}")

        normalized = self.base_url.rstrip('/')
        if normalized != self.base_url:
            object.__setattr__(self, 'base_url', normalized)

    @classmethod
    def create(
        cls,
        base_url: Optional[str] = None,
        timeout: Union[None, float, Tuple[float, float], TimeoutConfig] = None,
        verify_ssl: bool = True,
        raise_for_status: bool = False,
        headers: Optional[Dict[str, str]] = None,
        logging: Optional['LoggingConfig'] = None,
    ) -> 'PostClientConfig':
        """
        Удобный конструктор конфигурации.

        Args:
            base_url: Корень ресурса (по умолчанию jsonplaceholder)
            timeout: None, число (read), (connect, read) или TimeoutConfig
            verify_ssl: Проверять SSL
            raise_for_status: Не-2xx -> HTTPStatusError
            headers: Заголовки
            logging: Конфигурация логирования

        Examples:
            >>> config = PostClientConfig.create(timeout=60)
            >>> config = PostClientConfig.create(timeout=(3, 10), raise_for_status=True)
        """
        return cls(
            base_url=base_url or DEFAULT_BASE_URL,
            headers=headers or {},
            timeout=_coerce_timeout(timeout),
            verify_ssl=verify_ssl,
            raise_for_status=raise_for_status,
            logging=logging,
        )

    def with_timeout(self, timeout: Union[None, float, Tuple[float, float], TimeoutConfig]) -> 'PostClientConfig':
        """
        Создать новый конфиг с изменённым timeout.

        Example:
            >>> new_config = config.with_timeout(60)
        """
        return replace(self, timeout=_coerce_timeout(timeout))

    def with_headers(self, headers: Dict[str, str]) -> 'PostClientConfig':
        """
        Создать новый конфиг с дополнительными заголовками.

        Example:
            >>> new_config = config.with_headers({"Accept": "application/json"})
        """
        merged = dict(self.headers)
        merged.update(headers)
        return replace(self, headers=merged)

    def with_logging(self, logging: Optional['LoggingConfig']) -> 'PostClientConfig':
        """Создать новый конфиг с другой конфигурацией логирования."""
        return replace(self, logging=logging)


def _coerce_timeout(
    timeout: Union[None, float, Tuple[float, float], TimeoutConfig]
) -> Optional[TimeoutConfig]:
    if timeout is None or isinstance(timeout, TimeoutConfig):
        return timeout
    if isinstance(timeout, tuple):
        return TimeoutConfig(connect=timeout[0], read=timeout[1])
    return TimeoutConfig(connect=5, read=timeout)
