# ByteCodec Test Suite
"""
Test suite including:
- Unit tests (Base64, MD5)
- Integration tests (reference implementations)
- Security tests (invalid inputs)

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
