"""Tests for the one-time token transport codec."""

import base64
import os

import pytest

from src.core.exceptions import TokenDecodeError
from src.domain.services.auth.token_codec import OneTimeTokenCodec


class TestOneTimeTokenCodec:
    @pytest.fixture
    def codec(self):
        return OneTimeTokenCodec()

    @pytest.mark.parametrize("length", [0, 1, 2, 3, 4, 31, 32, 33, 64])
    def test_decode_reverses_encode(self, codec, length):
        raw = os.urandom(length)
        assert codec.decode(codec.encode(raw)) == raw

    def test_encoded_value_is_url_safe_without_padding(self, codec):
        # 0xfb 0xff encodes to "+/8=" in the standard alphabet
        encoded = codec.encode(b"\xfb\xff")

        assert encoded == "-_8"
        assert "=" not in encoded

    def test_repository_token_with_unsafe_characters_survives(self, codec):
        # Arrange
        token = base64.b64encode(b"\xfb\xff\xbf" * 11).decode("ascii")
        assert "+" in token and "/" in token

        # Act
        encoded = codec.encode_text(token)

        # Assert
        assert all(c.isalnum() or c in "-_" for c in encoded)
        assert codec.decode_text(encoded) == token

    @pytest.mark.parametrize("value", ["abc+def", "abc/def", "abc=", "has space", "ümlaut"])
    def test_rejects_characters_outside_alphabet(self, codec, value):
        with pytest.raises(TokenDecodeError) as exc_info:
            codec.decode(value)

        assert exc_info.value.message == "Invalid token."

    def test_rejects_impossible_length(self, codec):
        # No base64 encoding has length 4n + 1
        with pytest.raises(TokenDecodeError):
            codec.decode("abcde")

    def test_decode_text_rejects_non_utf8_bytes(self, codec):
        encoded = codec.encode(b"\xff\xfe\xfd")

        with pytest.raises(TokenDecodeError):
            codec.decode_text(encoded)

    def test_decode_error_is_a_credential_rejection(self, codec):
        from src.core.exceptions import CredentialRejectedError

        with pytest.raises(CredentialRejectedError):
            codec.decode("!!")
