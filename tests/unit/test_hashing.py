"""
Hashing Unit Tests
Tests for ctlog/crypto/hashing.py

Tests:
- sha256 known values and stability
- to_hex/from_hex round trip and 0x prefix handling
- from_hex rejection of malformed input
"""
import hashlib
import pytest

from ctlog.crypto.hashing import sha256, to_hex, from_hex


class TestSha256:
    """Tests for sha256() function."""

    def test_sha256_known_value(self):
        """Test sha256 produces correct hash for known input."""
        expected = hashlib.sha256(b"hello").digest()
        result = sha256(b"hello")

        assert result == expected
        assert len(result) == 32

    def test_sha256_empty_bytes(self):
        expected = hashlib.sha256(b"").digest()

        assert sha256(b"") == expected

    def test_sha256_different_inputs_different_outputs(self):
        assert sha256(b"input1") != sha256(b"input2")


class TestHexConversion:
    """Tests for to_hex() and from_hex()."""

    def test_to_hex_no_prefix(self):
        assert to_hex(b"\xde\xad\xbe\xef") == "deadbeef"

    def test_to_hex_empty(self):
        assert to_hex(b"") == ""

    def test_round_trip(self):
        data = bytes(range(32))

        assert from_hex(to_hex(data)) == data

    @pytest.mark.parametrize("text", ["0xdeadbeef", "0XDEADBEEF", "  deadbeef\n"])
    def test_from_hex_accepts_prefix_and_whitespace(self, text):
        assert from_hex(text) == b"\xde\xad\xbe\xef"

    def test_from_hex_odd_length(self):
        with pytest.raises(ValueError, match="even length"):
            from_hex("abc")

    def test_from_hex_invalid_characters(self):
        with pytest.raises(ValueError, match="Invalid hex"):
            from_hex("zz")
