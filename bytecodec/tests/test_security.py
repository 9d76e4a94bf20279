"""
Invalid-input tests for the codecs.

Tests specifically for rejection scenarios:
- Wrong lengths
- Foreign characters
- Misplaced or excessive padding
- Oversized MD5 messages
"""

import logging

import pytest

from src.core_codecs.base64_codec import base64_decode
from src.core_codecs.errors import (
    CodecError, InvalidLengthError, InvalidCharacterError, MessageTooLongError
)
from src.core_codecs.md5_digest import _pad_message
from src.core_codecs.logger import LOGGER_NAME


class TestInvalidLength:
    """Decode input must be a multiple of 4 symbols."""

    def test_three_characters(self):
        with pytest.raises(InvalidLengthError):
            base64_decode("TWF")

    @pytest.mark.parametrize("text", ["T", "TW", "TWFuT", "TWFuTW", "TWFuTWE"])
    def test_not_multiple_of_four(self, text):
        with pytest.raises(InvalidLengthError) as exc_info:
            base64_decode(text)
        assert exc_info.value.length == len(text)

    def test_length_checked_before_characters(self):
        """A bad length is reported even when characters are also bad."""
        with pytest.raises(InvalidLengthError):
            base64_decode("!!!")


class TestInvalidCharacter:
    """Characters outside alphabet plus padding are rejected."""

    def test_exclamation_mark(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            base64_decode("TW!u")
        assert exc_info.value.position == 2
        assert exc_info.value.character == "!"

    @pytest.mark.parametrize("text", [
        "TWF-", "TWF_", "TW u", "TWF\n", "TWF\x00", "TWFé", "TWF€",
    ])
    def test_foreign_symbols(self, text):
        with pytest.raises(InvalidCharacterError):
            base64_decode(text)

    def test_invalid_character_never_treated_as_zero(self):
        """'AAA!' must not decode as 'AAAA'."""
        with pytest.raises(InvalidCharacterError):
            base64_decode("AAA!")

    def test_non_ascii_bytes(self):
        with pytest.raises(InvalidCharacterError):
            base64_decode(b"TWF\xff")

    def test_error_in_later_group(self):
        """Validation covers every group, not only the first."""
        with pytest.raises(InvalidCharacterError) as exc_info:
            base64_decode("TWFuTWFu*WFu")
        assert exc_info.value.position == 8


class TestInvalidPadding:
    """Padding is only allowed as one or two trailing characters."""

    def test_three_padding_characters(self):
        with pytest.raises(InvalidCharacterError):
            base64_decode("T===")

    def test_all_padding(self):
        with pytest.raises(InvalidCharacterError):
            base64_decode("====")

    def test_padding_in_middle_of_group(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            base64_decode("TQ=A")
        assert exc_info.value.position == 2

    def test_padding_in_earlier_group(self):
        with pytest.raises(InvalidCharacterError):
            base64_decode("TQ==TWFu")

    def test_padding_reason_reported(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            base64_decode("T=Fu")
        assert "padding" in str(exc_info.value)


class TestErrorHierarchy:
    """All codec errors are ValueErrors."""

    def test_codec_errors_are_value_errors(self):
        for error_type in (InvalidLengthError, InvalidCharacterError, MessageTooLongError):
            assert issubclass(error_type, CodecError)
            assert issubclass(error_type, ValueError)

    def test_catchable_as_value_error(self):
        with pytest.raises(ValueError):
            base64_decode("TW!u")

    def test_rejection_is_logged(self, caplog):
        """Rejected input is reported on the package logger at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
            with pytest.raises(InvalidLengthError):
                base64_decode("abc")
        assert any(record.name == LOGGER_NAME for record in caplog.records)


class TestOversizedMessage:
    """MD5 length field overflow fails instead of truncating."""

    def test_too_long_message(self):
        class HugeBytes(bytes):
            def __len__(self):
                return 1 << 61

        with pytest.raises(MessageTooLongError) as exc_info:
            _pad_message(HugeBytes())
        assert exc_info.value.byte_length == 1 << 61
