"""
Tests for password hashing and JWT tokens
"""
from datetime import timedelta

from jose import jwt

from forohub.config import settings
from forohub.core.security import (
    hash_password, verify_password, create_access_token, decode_token
)


class TestPasswordHashing:

    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = hash_password("secret1")

        assert hashed != "secret1"
        assert verify_password("secret1", hashed)
        assert not verify_password("secret2", hashed)

    def test_same_password_hashes_differently(self):
        assert hash_password("secret1") != hash_password("secret1")

    def test_unrecognised_hash_does_not_verify(self):
        assert verify_password("secret1", "not-a-hash") is False


class TestAccessToken:

    def test_token_carries_identity_and_expiry(self):
        token = create_access_token({"sub": "42", "email": "ana@forohub.com"})
        payload = decode_token(token)

        assert payload["sub"] == "42"
        assert payload["email"] == "ana@forohub.com"
        assert payload["type"] == "access"
        assert "exp" in payload

    def test_expired_token_is_rejected(self):
        token = create_access_token({"sub": "42"}, expires_delta=timedelta(seconds=-10))

        assert decode_token(token) is None

    def test_token_signed_with_other_key_is_rejected(self):
        token = jwt.encode({"sub": "42"}, "some-other-key", algorithm=settings.ALGORITHM)

        assert decode_token(token) is None

    def test_garbage_is_rejected(self):
        assert decode_token("not.a.token") is None
