"""
Bookstore Backend — Password Hashing Unit Tests
==================================================

What:  Tests for bcrypt hashing/verification and the placeholder token.
How:   Uses a low work factor (rounds=4) except where the default cost is
       itself under test.
"""

import pytest

from bookstore.security import hash_password, issue_token, verify_password


class TestHashPassword:

    def test_hash_is_bcrypt_with_requested_cost(self):
        hashed = hash_password("hunter2", rounds=4)
        assert hashed.startswith("$2b$04$")

    def test_default_cost_comes_from_settings(self, monkeypatch):
        """Production cost factor is 12."""
        from bookstore import security

        monkeypatch.setattr(security.settings, "bcrypt_rounds", 12)
        assert hash_password("hunter2").startswith("$2b$12$")

    def test_hash_is_salted(self):
        """Same password twice → different hashes."""
        assert hash_password("same", rounds=4) != hash_password("same", rounds=4)

    def test_hash_never_contains_plaintext(self):
        assert "correct horse" not in hash_password("correct horse", rounds=4)


class TestVerifyPassword:

    @pytest.mark.parametrize("password", ["a", "secret-pass", "пароль", "p@ss w0rd!"])
    def test_roundtrip(self, password):
        assert verify_password(password, hash_password(password, rounds=4)) is True

    def test_wrong_password(self):
        hashed = hash_password("right", rounds=4)
        assert verify_password("wrong", hashed) is False
        assert verify_password("Right", hashed) is False
        assert verify_password("right ", hashed) is False

    @pytest.mark.parametrize(
        "bad_hash",
        ["", "not-a-hash", "$2b$04$tooshort", "plaintext-password"],
    )
    def test_malformed_hash_is_a_failed_verification(self, bad_hash):
        """Malformed hashes must not raise."""
        assert verify_password("anything", bad_hash) is False

    def test_long_password_is_accepted(self):
        """bcrypt's 72-byte limit must not turn into an exception."""
        password = "x" * 100
        assert verify_password(password, hash_password(password, rounds=4)) is True


def test_issue_token_is_derived_from_user_id():
    assert issue_token(42) == "fake-token-42"
