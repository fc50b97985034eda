"""Tests for greeting parsing and authentication."""

import hashlib

import pytest

from pjlink_projector.exceptions import PjlinkAuthError, PjlinkProtocolError
from pjlink_projector.protocol import Greeting, build_command_line, compute_digest


class TestGreeting:
    """Tests for Greeting.parse."""

    def test_no_auth(self):
        """Test greeting that does not require authentication."""
        greeting = Greeting.parse("PJLINK 0")
        assert greeting.auth_required is False
        assert greeting.seed is None

    def test_no_auth_with_terminator(self):
        """Test that a trailing carriage return is tolerated."""
        assert Greeting.parse("PJLINK 0\r") == Greeting(False)

    def test_auth_extracts_seed(self):
        """Test that the seed is taken verbatim from offsets 9..16."""
        greeting = Greeting.parse("PJLINK 1 498e4a67\r")
        assert greeting.auth_required is True
        assert greeting.seed == "498e4a67"

    def test_seed_not_validated_as_hex(self):
        """Test that any 8 characters are accepted as the seed."""
        assert Greeting.parse("PJLINK 1 ABCDEFGH").seed == "ABCDEFGH"

    @pytest.mark.parametrize("text", ["PJLINK 2", "PJLINK ERRA", "HELLO WORLD"])
    def test_unrecognized_flag(self, text):
        """Test that an unknown auth flag is a protocol error."""
        with pytest.raises(PjlinkProtocolError):
            Greeting.parse(text)

    @pytest.mark.parametrize("text", ["", "PJLINK", "PJLINK "])
    def test_truncated(self, text):
        """Test that a greeting too short to hold the flag is a protocol error."""
        with pytest.raises(PjlinkProtocolError):
            Greeting.parse(text)

    def test_truncated_seed(self):
        """Test that a greeting too short to hold the seed is a protocol error."""
        with pytest.raises(PjlinkProtocolError):
            Greeting.parse("PJLINK 1 498e")

    def test_seed_offsets_count_bytes(self):
        """Test that a multi-byte seed character occupies its bytes, not one character."""
        greeting = Greeting.parse(b"PJLINK 1 \xc3\xa9ABCDEF\r")
        assert len(greeting.seed) == 8
        assert not greeting.seed.endswith("\r")
        assert compute_digest(greeting.seed, "pass") == hashlib.md5(b"\xc3\xa9ABCDEFpass").hexdigest()

    def test_bytes_and_text_agree_for_ascii(self):
        """Test that raw bytes and text parse to the same greeting."""
        assert Greeting.parse(b"PJLINK 1 498e4a67\r") == Greeting.parse("PJLINK 1 498e4a67\r")


class TestDigest:
    """Tests for compute_digest."""

    def test_documented_example(self):
        """Test against the example in the PJLink specification."""
        assert compute_digest("498e4a67", "JBMIAProjectorLink") == "5d8409bc1c3fa39749434aa3a5c38682"

    def test_matches_md5_of_concatenation(self):
        """Test that the digest is MD5 over seed followed by password."""
        assert compute_digest("ABCDEFGH", "pass") == hashlib.md5(b"ABCDEFGHpass").hexdigest()
        assert compute_digest("ABCDEFGH", "pass") == "b154f4e5e9db1664b85eea962d1e585a"

    def test_deterministic(self):
        """Test that identical inputs give identical digests."""
        assert compute_digest("12345678", "secret") == compute_digest("12345678", "secret")

    def test_sensitive_to_inputs(self):
        """Test that changing seed or password changes the digest."""
        base = compute_digest("12345678", "secret")
        assert compute_digest("12345679", "secret") != base
        assert compute_digest("12345678", "secres") != base

    @pytest.mark.parametrize("password", ["a", "pass", "x" * 32, "p" * 100])
    def test_fixed_length_lowercase_hex(self, password):
        """Test that the digest is 32 lowercase hex characters for any password."""
        digest = compute_digest("ABCDEFGH", password)
        assert len(digest) == 32
        assert digest == digest.lower()
        int(digest, 16)


class TestBuildCommandLine:
    """Tests for build_command_line."""

    def test_no_auth(self):
        """Test framing without authentication."""
        assert build_command_line(Greeting(False), None, "POWR ?") == "%1POWR ?\r"

    def test_no_auth_ignores_password(self):
        """Test that a configured password is not used when not required."""
        assert build_command_line(Greeting(False), "pass", "POWR ?") == "%1POWR ?\r"

    def test_auth_prefixes_digest(self):
        """Test that the digest over seed + password precedes the command."""
        line = build_command_line(Greeting(True, "ABCDEFGH"), "pass", "POWR ?")
        assert line == hashlib.md5(b"ABCDEFGHpass").hexdigest() + "%1POWR ?\r"

    @pytest.mark.parametrize("password", [None, ""])
    def test_auth_without_password(self, password):
        """Test that missing passwords fail when authentication is required."""
        with pytest.raises(PjlinkAuthError):
            build_command_line(Greeting(True, "ABCDEFGH"), password, "POWR ?")
