"""Tests for JoseTokenService."""

import unittest
import sys
from datetime import timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from jose import jwt

from adapter.jwt.token_service import JoseTokenService
from domain.model.errors import AuthError, ExpiredTokenError, InvalidTokenError


class TestJoseTokenService(unittest.TestCase):

    def setUp(self):
        self.service = JoseTokenService("test-secret")

    def test_issue_then_verify_returns_user_id(self):
        token = self.service.issue("user-1")

        self.assertEqual(self.service.verify(token), "user-1")

    def test_token_carries_expiry_after_issue_time(self):
        token = self.service.issue("user-1")
        claims = jwt.get_unverified_claims(token)

        self.assertEqual(claims["sub"], "user-1")
        self.assertEqual(claims["exp"] - claims["iat"], 10 * 3600)

    def test_expired_token(self):
        service = JoseTokenService("test-secret", expires_in=timedelta(seconds=-30))
        token = service.issue("user-1")

        with self.assertRaises(ExpiredTokenError):
            self.service.verify(token)

    def test_token_signed_with_other_key(self):
        token = JoseTokenService("other-secret").issue("user-1")

        with self.assertRaises(InvalidTokenError):
            self.service.verify(token)

    def test_garbage_token(self):
        with self.assertRaises(InvalidTokenError):
            self.service.verify("not-a-jwt")

    def test_token_without_subject(self):
        token = jwt.encode({"foo": "bar"}, "test-secret", algorithm="HS256")

        with self.assertRaises(InvalidTokenError):
            self.service.verify(token)

    def test_both_failures_are_auth_errors(self):
        self.assertTrue(issubclass(ExpiredTokenError, AuthError))
        self.assertTrue(issubclass(InvalidTokenError, AuthError))

    def test_empty_key_rejected(self):
        with self.assertRaises(ValueError):
            JoseTokenService("")


if __name__ == '__main__':
    unittest.main()
