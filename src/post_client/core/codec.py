# src/post_client/core/codec.py
"""
JSON codec for Post records.

TypeAdapter instances are built once per codec and reused across calls;
a codec holds no per-call state and can be shared between threads.
"""

from typing import List, Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from ..models import Post
from .exceptions import DecodeError


class PostCodec:
    """
    Decoder/encoder between JSON text and Post values.

    Example:
        >>> codec = PostCodec()
        >>> post = codec.decode_post('{"id": 1, "userId": 1}')
        >>> codec.decode_post(codec.encode_post(post)) == post
        True
    """

    def __init__(self):
        self._post_adapter = TypeAdapter(Post)
        self._posts_adapter = TypeAdapter(List[Post])

    def decode_post(
        self,
        body: Union[str, bytes],
        url: Optional[str] = None,
        status_code: Optional[int] = None
    ) -> Post:
        """
        Decode a single JSON object into a Post.

        Args:
            body: Response body (JSON text)
            url: Request URL, attached to the error for diagnostics
            status_code: Response status, attached to the error

        Raises:
            DecodeError: Empty body, malformed JSON or wrong shape
        """
        return self._decode(self._post_adapter, "post object", body, url, status_code)

    def decode_posts(
        self,
        body: Union[str, bytes],
        url: Optional[str] = None,
        status_code: Optional[int] = None
    ) -> List[Post]:
        """
        Decode a JSON array into a list of Post, keeping server order.

        Raises:
            DecodeError: Empty body, malformed JSON or not an array of posts
        """
        return self._decode(self._posts_adapter, "array of post objects", body, url, status_code)

    def encode_post(self, post: Post) -> str:
        """Encode a Post as JSON using upstream key names (``userId``)."""
        return self._post_adapter.dump_json(post, by_alias=True).decode("utf-8")

    def encode_posts(self, posts: Sequence[Post]) -> str:
        """Encode a sequence of Post as a JSON array."""
        return self._posts_adapter.dump_json(list(posts), by_alias=True).decode("utf-8")

    @staticmethod
    def _decode(adapter, expected, body, url, status_code):
        text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body

        if not text or not text.strip():
            raise DecodeError(f"Empty response body, expected {expected}", url, status_code, text)

        try:
            return adapter.validate_json(text)
        except ValidationError as e:
            # error_count() covers both malformed JSON and shape mismatches
            raise DecodeError(
                f"Cannot decode {expected}: {e.error_count()} error(s), first: {_first_error(e)}",
                url,
                status_code,
                text
            ) from e


def _first_error(error: ValidationError) -> str:
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    return f"{location}: {first.get('msg', '')}"
