"""
Иерархия исключений Post Client.

Классификация:
- TransportError - запрос не удалось отправить или дождаться ответа
- DecodeError - тело ответа не разбирается в ожидаемую форму
- HTTPStatusError - не-2xx статус (только при raise_for_status=True)
"""

from typing import Optional

import httpx
import requests

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PostClientException(Exception):
    """Базовое исключение Post Client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TRANSPORT
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TransportError(PostClientException):
    """
    Сетевой вызов не завершился.

    Примеры: connection refused, DNS, таймаут, прерванное ожидание.
    """

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        full_message = f"{message}"
        if url:
            full_message += f" (url: {url})"
        super().__init__(full_message)

class TimeoutError(TransportError):
    """
    Таймаут запроса.

    Args:
        message: Сообщение об ошибке
        url: URL запроса
        timeout_type: Тип таймаута ('connect' или 'read')
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        timeout_type: Optional[str] = None
    ):
        self.timeout_type = timeout_type

        msg = message
        if timeout_type:
            msg += f" ({timeout_type} timeout)"

        super().__init__(msg, url)

class ConnectionError(TransportError):
    """
    Ошибка подключения.

    Примеры:
    - Connection refused
    - Connection reset
    - Network unreachable
    """
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# RESPONSE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class DecodeError(PostClientException):
    """
    Тело ответа не соответствует ожидаемой форме.

    Примеры:
    - Битый JSON или пустое тело
    - Объект там, где ожидался массив
    - Нет обязательных полей (id, userId)

    Args:
        message: Сообщение
        url: URL запроса (если был запрос)
        status_code: HTTP статус ответа (если был ответ)
        body: Начало тела ответа для диагностики
    """

    BODY_EXCERPT_LENGTH = 200

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None
    ):
        self.url = url
        self.status_code = status_code
        self.body = body[:self.BODY_EXCERPT_LENGTH] if body else body

        msg = message
        if url:
            msg += f" (url: {url}"
            if status_code is not None:
                msg += f", status: {status_code}"
            msg += ")"

        super().__init__(msg)

class HTTPStatusError(PostClientException):
    """
    Не-2xx ответ при включённом raise_for_status.

    Args:
        status_code: HTTP статус
        url: URL
        message: Дополнительное сообщение (обычно начало тела)
    """

    def __init__(self, status_code: int, url: str, message: str = ""):
        self.status_code = status_code
        self.url = url

        msg = f"HTTP {status_code} error for {url}"
        if message:
            msg += f": {message}"

        super().__init__(msg)

class ConfigurationError(PostClientException):
    """Ошибка конфигурации."""
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# УТИЛИТЫ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def classify_requests_exception(exc: Exception, url: str) -> PostClientException:
    """
    Конвертировать requests.exceptions в наши исключения.

    Args:
        exc: Исключение из requests
        url: URL запроса

    Returns:
        TransportError (или подкласс) с правильной классификацией

    Examples:
        >>> exc = requests.exceptions.ConnectTimeout()
        >>> our_exc = classify_requests_exception(exc, "https://example.com")
        >>> assert isinstance(our_exc, TimeoutError)
    """
    if isinstance(exc, requests.exceptions.ConnectTimeout):
        return TimeoutError("Request timeout", url, timeout_type="connect")

    elif isinstance(exc, requests.exceptions.Timeout):
        return TimeoutError("Request timeout", url, timeout_type="read")

    elif isinstance(exc, requests.exceptions.ConnectionError):
        return ConnectionError("Connection error", url)

    else:
        return TransportError(f"Request failed: {exc}", url)


def classify_httpx_exception(exc: Exception, url: str) -> PostClientException:
    """
    Конвертировать httpx исключения в наши исключения.

    Args:
        exc: Исключение из httpx
        url: URL запроса

    Returns:
        TransportError (или подкласс)
    """
    if isinstance(exc, httpx.ConnectTimeout):
        return TimeoutError("Request timeout", url, timeout_type="connect")

    elif isinstance(exc, httpx.TimeoutException):
        return TimeoutError("Request timeout", url, timeout_type="read")

    elif isinstance(exc, (httpx.ConnectError, httpx.NetworkError)):
        return ConnectionError("Connection error", url)

    else:
        return TransportError(f"Request failed: {exc}", url)
