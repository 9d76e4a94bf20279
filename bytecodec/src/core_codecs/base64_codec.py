"""
Base64 Codec Implementation (From Scratch)

Implements the standard Base64 transfer encoding (RFC 4648, section 4)
without using the base64 or binascii modules.

Components:
- Encoding table: the 64-symbol alphabet A-Z, a-z, 0-9, '+', '/'
- Decoding table: 256-entry inverse table indexed by character code
- Encoder: 3 bytes -> 4 symbols, '=' padding for short final groups
- Decoder: full validation first, then 4 symbols -> 3 bytes
"""

from typing import List, Sequence, Union

from .errors import InvalidCharacterError, InvalidLengthError
from .logger import logger


# Standard alphabet, index i encodes the 6-bit value i
BASE64_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "+/"
)

BASE64_PAD = "="

# Marks a character code that is not part of the alphabet
INVALID_SYMBOL = -1

_PAD_CODE = ord(BASE64_PAD)
_ENCODE_TABLE = BASE64_ALPHABET.encode("ascii")


def _build_decode_table(alphabet: str) -> tuple:
    """Invert the alphabet into a 256-entry lookup table."""
    table = [INVALID_SYMBOL] * 256
    for index, symbol in enumerate(alphabet):
        table[ord(symbol)] = index
    return tuple(table)


BASE64_DECODE_TABLE = _build_decode_table(BASE64_ALPHABET)


BytesLike = Union[bytes, bytearray, memoryview]


def _to_bytes(data: BytesLike) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(
        f"Expected a bytes-like object, got {type(data).__name__}"
    )


def base64_encode(data: BytesLike) -> str:
    """
    Encode bytes as standard Base64 text.

    Every complete 3-byte group becomes 4 symbols. A final group of one
    byte becomes 2 symbols plus '==', a final group of two bytes becomes
    3 symbols plus '='.

    Args:
        data: Bytes to encode

    Returns:
        Base64 text of length 4 * ceil(len(data) / 3)

    Example:
        >>> base64_encode(b"Man")
        'TWFu'
    """
    data = _to_bytes(data)
    full_length = len(data) - len(data) % 3
    table = _ENCODE_TABLE
    out = bytearray()

    for i in range(0, full_length, 3):
        group = (data[i] << 16) | (data[i + 1] << 8) | data[i + 2]
        out.append(table[(group >> 18) & 0x3F])
        out.append(table[(group >> 12) & 0x3F])
        out.append(table[(group >> 6) & 0x3F])
        out.append(table[group & 0x3F])

    remainder = len(data) - full_length
    if remainder == 1:
        group = data[full_length] << 16
        out.append(table[(group >> 18) & 0x3F])
        out.append(table[(group >> 12) & 0x3F])
        out += b"=="
    elif remainder == 2:
        group = (data[full_length] << 16) | (data[full_length + 1] << 8)
        out.append(table[(group >> 18) & 0x3F])
        out.append(table[(group >> 12) & 0x3F])
        out.append(table[(group >> 6) & 0x3F])
        out += b"="

    return out.decode("ascii")


def _symbol_codes(text: Union[str, BytesLike]) -> Sequence[int]:
    """Return the character codes of the input, str or ASCII bytes."""
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    return _to_bytes(text)


def _trailing_padding(codes: Sequence[int]) -> int:
    count = 0
    for code in reversed(codes):
        if code != _PAD_CODE:
            break
        count += 1
    return count


def _validate(codes: Sequence[int]) -> List[int]:
    """
    Check a Base64 symbol sequence and translate it to 6-bit values.

    The input is validated in full before anything is decoded, so a
    failure never leaves partial output behind.

    Args:
        codes: Character codes of the input

    Returns:
        6-bit values of the non-padding symbols

    Raises:
        InvalidLengthError: If the length is not a multiple of 4
        InvalidCharacterError: On a foreign symbol, misplaced padding or
            more than two padding characters
    """
    if len(codes) % 4 != 0:
        logger.debug("Rejecting Base64 input of length %d", len(codes))
        raise InvalidLengthError(len(codes))

    padding = _trailing_padding(codes)
    if padding > 2:
        position = len(codes) - padding
        logger.debug("Rejecting Base64 input with %d padding characters", padding)
        raise InvalidCharacterError(position, BASE64_PAD,
                                    reason="too many padding characters")

    values = []
    for position in range(len(codes) - padding):
        code = codes[position]
        value = BASE64_DECODE_TABLE[code] if code < 256 else INVALID_SYMBOL
        if value == INVALID_SYMBOL:
            character = chr(code)
            reason = ("padding character in non-trailing position"
                      if code == _PAD_CODE else "invalid Base64 character")
            logger.debug("Rejecting Base64 input: %s %r at %d",
                         reason, character, position)
            raise InvalidCharacterError(position, character, reason=reason)
        values.append(value)

    return values


def base64_decode(text: Union[str, BytesLike]) -> bytes:
    """
    Decode standard Base64 text into bytes.

    Args:
        text: Base64 text, as str or ASCII bytes

    Returns:
        Decoded bytes

    Raises:
        InvalidLengthError: If the input length is not a multiple of 4
        InvalidCharacterError: If the input contains a symbol outside the
            alphabet, padding before the end, or more than two '='

    Example:
        >>> base64_decode("TWFu")
        b'Man'
    """
    values = _validate(_symbol_codes(text))
    full_length = len(values) - len(values) % 4
    out = bytearray()

    for i in range(0, full_length, 4):
        group = ((values[i] << 18) | (values[i + 1] << 12)
                 | (values[i + 2] << 6) | values[i + 3])
        out.append((group >> 16) & 0xFF)
        out.append((group >> 8) & 0xFF)
        out.append(group & 0xFF)

    # Final group carried 2 or 3 symbols followed by padding
    remainder = len(values) - full_length
    if remainder == 2:
        group = (values[full_length] << 18) | (values[full_length + 1] << 12)
        out.append((group >> 16) & 0xFF)
    elif remainder == 3:
        group = ((values[full_length] << 18) | (values[full_length + 1] << 12)
                 | (values[full_length + 2] << 6))
        out.append((group >> 16) & 0xFF)
        out.append((group >> 8) & 0xFF)

    return bytes(out)


def base64_encode_string(text: str, encoding: str = 'utf-8') -> str:
    """
    Base64-encode a string.

    Args:
        text: Input string
        encoding: String encoding (default: utf-8)

    Returns:
        Base64 text
    """
    return base64_encode(text.encode(encoding))


def base64_decode_string(text: Union[str, BytesLike], encoding: str = 'utf-8') -> str:
    """Decode Base64 text and interpret the result as a string."""
    return base64_decode(text).decode(encoding)


# Self-test when run directly
if __name__ == "__main__":
    # Test vectors from RFC 4648, section 10
    test_cases = [
        (b"", ""),
        (b"f", "Zg=="),
        (b"fo", "Zm8="),
        (b"foo", "Zm9v"),
        (b"foob", "Zm9vYg=="),
        (b"fooba", "Zm9vYmE="),
        (b"foobar", "Zm9vYmFy"),
        (b"Man", "TWFu"),
    ]

    print("Base64 Implementation Test")
    print("=" * 60)

    all_passed = True
    for data, expected in test_cases:
        encoded = base64_encode(data)
        decoded = base64_decode(expected)
        passed = encoded == expected and decoded == data
        all_passed = all_passed and passed

        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"\nInput:    {data!r}")
        print(f"Expected: {expected!r}")
        print(f"Got:      {encoded!r}")
        print(f"Status:   {status}")

    print("\n" + "=" * 60)
    print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")
