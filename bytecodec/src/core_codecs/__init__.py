# Core Codecs Module
"""
Byte-level codec implementations including:
- Base64 encoding and decoding (standard alphabet, '=' padding)
- MD5 message digest (RFC 1321)

Both are pure functions over bytes with no shared mutable state.
"""

_EXPORTS = {
    'base64_encode': 'base64_codec',
    'base64_decode': 'base64_codec',
    'base64_encode_string': 'base64_codec',
    'base64_decode_string': 'base64_codec',
    'BASE64_ALPHABET': 'base64_codec',
    'BASE64_PAD': 'base64_codec',
    'md5': 'md5_digest',
    'md5_hex': 'md5_digest',
    'md5_string': 'md5_digest',
    'DIGEST_SIZE': 'md5_digest',
    'CodecError': 'errors',
    'InvalidLengthError': 'errors',
    'InvalidCharacterError': 'errors',
    'MessageTooLongError': 'errors',
}


# Lazy imports to avoid RuntimeWarning when running a module directly
def __getattr__(name):
    """Resolve public names from their defining module on first access."""
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module
    module = import_module(f".{_EXPORTS[name]}", __name__)
    return getattr(module, name)


__all__ = list(_EXPORTS)
