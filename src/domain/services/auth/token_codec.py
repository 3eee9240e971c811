"""Transport codec for one-time tokens.

Repository-issued tokens are opaque and may contain ``+``, ``/`` or ``=``.
Before they are embedded in a confirmation or reset URL they are encoded with
the URL-safe base64 alphabet, without padding, and decoded again when the
user follows the link.
"""

import base64
import binascii
import re

from src.core.exceptions import TokenDecodeError

_URL_SAFE_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


class OneTimeTokenCodec:
    """Encodes and decodes one-time tokens for transport in URLs.

    ``decode(encode(raw)) == raw`` holds for every byte string.
    """

    @staticmethod
    def encode(raw: bytes) -> str:
        return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")

    @staticmethod
    def decode(value: str) -> bytes:
        """Decode a URL-safe token back to its raw bytes.

        Raises:
            TokenDecodeError: If ``value`` uses characters outside the URL-safe
                alphabet or has a length no base64 encoding can produce.
        """
        if not isinstance(value, str) or not _URL_SAFE_ALPHABET.fullmatch(value):
            raise TokenDecodeError()
        if len(value) % 4 == 1:
            raise TokenDecodeError()

        padded = value + "=" * (-len(value) % 4)
        try:
            return base64.urlsafe_b64decode(padded)
        except (binascii.Error, ValueError) as e:
            raise TokenDecodeError() from e

    def encode_text(self, token: str) -> str:
        return self.encode(token.encode("utf-8"))

    def decode_text(self, value: str) -> str:
        """Decode a URL-safe token and interpret it as UTF-8 text.

        Raises:
            TokenDecodeError: If decoding fails or the bytes are not UTF-8.
        """
        raw = self.decode(value)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TokenDecodeError() from e
