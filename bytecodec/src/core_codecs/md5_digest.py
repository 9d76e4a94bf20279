"""
MD5 Hash Implementation (From Scratch)

Implements the MD5 message digest as defined in RFC 1321.
This implementation avoids using hashlib and builds the algorithm from scratch.

MD5 is cryptographically broken; it is provided for checksums and
compatibility with existing formats, not for security.

Components:
- Padding: Pads message to multiple of 512 bits (little-endian length)
- Block decomposition: 64-byte blocks as 16 little-endian 32-bit words
- Compression: 4 rounds of 16 steps with functions F, G, H, I
- Output: 128-bit (16-byte) digest
"""

from typing import List, Tuple, Union

from .errors import MessageTooLongError
from .logger import logger

# Try to import cryptography for a reference comparison
try:
    from cryptography.hazmat.primitives import hashes
    HAS_CRYPTOGRAPHY = True
except ImportError:
    HAS_CRYPTOGRAPHY = False


BLOCK_SIZE = 64
DIGEST_SIZE = 16

# Mask for 32-bit arithmetic
MASK_32 = 0xFFFFFFFF

# Initial register values A, B, C, D
MD5_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# Per-step left rotation amounts
SHIFT_AMOUNTS = (
    7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22,
    5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20,
    4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23,
    6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21,
)

# Per-step additive constants: floor(2^32 * abs(sin(i + 1)))
SINE_CONSTANTS = (
    0xd76aa478, 0xe8c7b756, 0x242070db, 0xc1bdceee,
    0xf57c0faf, 0x4787c62a, 0xa8304613, 0xfd469501,
    0x698098d8, 0x8b44f7af, 0xffff5bb1, 0x895cd7be,
    0x6b901122, 0xfd987193, 0xa679438e, 0x49b40821,
    0xf61e2562, 0xc040b340, 0x265e5a51, 0xe9b6c7aa,
    0xd62f105d, 0x02441453, 0xd8a1e681, 0xe7d3fbc8,
    0x21e1cde6, 0xc33707d6, 0xf4d50d87, 0x455a14ed,
    0xa9e3e905, 0xfcefa3f8, 0x676f02d9, 0x8d2a4c8a,
    0xfffa3942, 0x8771f681, 0x6d9d6122, 0xfde5380c,
    0xa4beea44, 0x4bdecfa9, 0xf6bb4b60, 0xbebfbc70,
    0x289b7ec6, 0xeaa127fa, 0xd4ef3085, 0x04881d05,
    0xd9d4d039, 0xe6db99e5, 0x1fa27cf8, 0xc4ac5665,
    0xf4292244, 0x432aff97, 0xab9423a7, 0xfc93a039,
    0x655b59c3, 0x8f0ccc92, 0xffeff47d, 0x85845dd1,
    0x6fa87e4f, 0xfe2ce6e0, 0xa3014314, 0x4e0811a1,
    0xf7537e82, 0xbd3af235, 0x2ad7d2bb, 0xeb86d391,
)

# Message word used by each step
WORD_SCHEDULE = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    1, 6, 11, 0, 5, 10, 15, 4, 9, 14, 3, 8, 13, 2, 7, 12,
    5, 8, 11, 14, 1, 4, 7, 10, 13, 0, 3, 6, 9, 12, 15, 2,
    0, 7, 14, 5, 12, 3, 10, 1, 8, 15, 6, 13, 4, 11, 2, 9,
)

# Largest message whose bit length fits the 64-bit length field
_MAX_MESSAGE_BYTES = (1 << 64) // 8 - 1


def _rotate_left(value: int, amount: int) -> int:
    """Left rotate a 32-bit integer by the specified amount."""
    value &= MASK_32
    return ((value << amount) | (value >> (32 - amount))) & MASK_32


def _f(x: int, y: int, z: int) -> int:
    """Round 1: if x then y else z (bitwise)."""
    return (x & y) | (~x & z)


def _g(x: int, y: int, z: int) -> int:
    """Round 2: if z then x else y (bitwise)."""
    return (x & z) | (y & ~z)


def _h(x: int, y: int, z: int) -> int:
    """Round 3: parity."""
    return x ^ y ^ z


def _i(x: int, y: int, z: int) -> int:
    """Round 4."""
    return y ^ (x | (~z & MASK_32))


# Mixing function for each of the four rounds
ROUND_FUNCTIONS = (_f, _g, _h, _i)


def _pad_message(data: bytes) -> bytes:
    """
    Pad the message according to the MD5 specification.

    Padding rules:
    1. Append bit '1' to message (0x80 byte)
    2. Append zeros until message length ≡ 448 (mod 512)
    3. Append original message length as 64-bit little-endian integer

    Args:
        data: The original message bytes

    Returns:
        Padded message as bytes (length is multiple of 64 bytes / 512 bits)

    Raises:
        MessageTooLongError: If the bit length does not fit in 64 bits
    """
    original_length = len(data)
    if original_length > _MAX_MESSAGE_BYTES:
        logger.debug("Rejecting MD5 input of %d bytes", original_length)
        raise MessageTooLongError(original_length)

    padding_length = (55 - original_length) % BLOCK_SIZE
    return (data + b'\x80' + b'\x00' * padding_length
            + (original_length * 8).to_bytes(8, byteorder='little'))


def _bytes_to_words(block: bytes) -> List[int]:
    """Convert a 64-byte block into 16 32-bit words (little-endian)."""
    return [
        int.from_bytes(block[i:i + 4], byteorder='little')
        for i in range(0, BLOCK_SIZE, 4)
    ]


def _compress(state: Tuple[int, int, int, int], words: List[int]) -> Tuple[int, int, int, int]:
    """
    Run the 64 MD5 steps over one block.

    Each step computes a' = b + rotl(a + f(b, c, d) + X[k] + T[i], s[i])
    and then rotates the register roles so (a, b, c, d) becomes
    (d, a', b, c).

    Args:
        state: Current registers (A, B, C, D)
        words: Sixteen little-endian message words

    Returns:
        Updated registers
    """
    a, b, c, d = state

    for i in range(64):
        mix = ROUND_FUNCTIONS[i >> 4]
        total = (a + mix(b, c, d) + words[WORD_SCHEDULE[i]] + SINE_CONSTANTS[i]) & MASK_32
        a, b, c, d = d, (b + _rotate_left(total, SHIFT_AMOUNTS[i])) & MASK_32, b, c

    return (
        (state[0] + a) & MASK_32,
        (state[1] + b) & MASK_32,
        (state[2] + c) & MASK_32,
        (state[3] + d) & MASK_32,
    )


def md5(data: Union[bytes, bytearray, memoryview]) -> bytes:
    """
    Compute the MD5 digest of the input data.

    Args:
        data: Input bytes to hash

    Returns:
        128-bit (16-byte) digest as bytes

    Example:
        >>> md5(b"abc").hex()
        '900150983cd24fb0d6963f7d28e17f72'
    """
    if isinstance(data, (bytearray, memoryview)):
        data = bytes(data)
    elif not isinstance(data, bytes):
        raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}")

    padded = _pad_message(data)
    state = MD5_INITIAL_STATE

    for offset in range(0, len(padded), BLOCK_SIZE):
        words = _bytes_to_words(padded[offset:offset + BLOCK_SIZE])
        state = _compress(state, words)

    return b''.join(word.to_bytes(4, byteorder='little') for word in state)


def md5_hex(data: Union[bytes, bytearray, memoryview]) -> str:
    """
    Compute MD5 hash and return as hexadecimal string.

    Args:
        data: Input bytes to hash

    Returns:
        32-character lowercase hexadecimal string
    """
    return md5(data).hex()


def md5_string(text: str, encoding: str = 'utf-8') -> bytes:
    """
    Compute MD5 hash of a string.

    Args:
        text: Input string to hash
        encoding: String encoding (default: utf-8)

    Returns:
        128-bit (16-byte) digest as bytes
    """
    return md5(text.encode(encoding))


def reference_md5_hex(data: bytes) -> str:
    """MD5 via the cryptography package, used to cross-check this module."""
    if not HAS_CRYPTOGRAPHY:
        raise ImportError("cryptography library required for reference MD5")
    digest = hashes.Hash(hashes.MD5())
    digest.update(bytes(data))
    return digest.finalize().hex()


# Self-test when run directly
if __name__ == "__main__":
    # Test vectors from RFC 1321, appendix A.5
    test_cases = [
        (b"", "d41d8cd98f00b204e9800998ecf8427e"),
        (b"a", "0cc175b9c0f1b6a831c399e269772661"),
        (b"abc", "900150983cd24fb0d6963f7d28e17f72"),
        (b"message digest", "f96b697d7cb7938d525a2f31aaf161d0"),
        (b"abcdefghijklmnopqrstuvwxyz", "c3fcd3d76192e4007dfb496cca67e13b"),
        (b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
         "d174ab98d277d9f5a5611c2c9f419d9f"),
        (b"1234567890" * 8, "57edf4a22be3c955ac49da2e2107b67a"),
    ]

    print("MD5 Implementation Test")
    print("=" * 60)

    all_passed = True
    for data, expected in test_cases:
        result = md5_hex(data)
        passed = result == expected
        if HAS_CRYPTOGRAPHY:
            passed = passed and reference_md5_hex(data) == result
        all_passed = all_passed and passed

        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"\nInput: {data[:50]}{'...' if len(data) > 50 else ''}")
        print(f"Expected: {expected}")
        print(f"Got:      {result}")
        print(f"Status:   {status}")

    if not HAS_CRYPTOGRAPHY:
        print("\nReference comparison skipped (cryptography not installed)")

    print("\n" + "=" * 60)
    print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")
