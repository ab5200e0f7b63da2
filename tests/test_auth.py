import unittest
from datetime import timedelta
from types import SimpleNamespace

from jose import jwt

from surplus_sales.auth import (
    Principal,
    authenticate,
    create_access_token,
    decode_access_token,
    hash_password,
    validate_password,
    verify_password,
)
from surplus_sales.config import get_settings
from surplus_sales.errors import (
    AuthenticationError,
    AuthFailure,
    ConflictError,
    InactiveAccountError,
    PermissionDeniedError,
    ValidationError,
)
from surplus_sales.permissions import POLICIES, check_policy
from surplus_sales.repositories import UserRepository
from tests.base import RepositoryTestCase


def fake_user(role="staff", user_id="user-1"):
    return SimpleNamespace(id=user_id, email="someone@example.com", role=role)


class TestPasswords(unittest.TestCase):

    def test_hash_and_verify(self):
        hashed = hash_password("Secret123")
        self.assertNotEqual(hashed, "Secret123")
        self.assertTrue(verify_password("Secret123", hashed))
        self.assertFalse(verify_password("secret123", hashed))

    def test_verify_with_malformed_hash_is_false(self):
        self.assertFalse(verify_password("Secret123", "not-a-bcrypt-hash"))

    def test_password_policy(self):
        self.assertEqual(validate_password("Secret123"), "Secret123")
        for weak in ("", "Sh0rt", "alllowercase1", "ALLUPPERCASE1", "NoDigitsHere", "A1a" + "x" * 80):
            with self.assertRaises(ValidationError, msg=weak):
                validate_password(weak)


class TestTokens(unittest.TestCase):

    def test_round_trip(self):
        token = create_access_token(fake_user(role="admin"))
        principal = decode_access_token(token)
        self.assertEqual(principal, Principal(user_id="user-1", email="someone@example.com", role="admin"))

    def test_expired_token(self):
        token = create_access_token(fake_user(), expires_delta=timedelta(seconds=-10))
        with self.assertRaises(AuthenticationError) as ctx:
            decode_access_token(token)
        self.assertEqual(ctx.exception.message, "Token has expired")
        self.assertEqual(ctx.exception.status_code, 401)

    def test_wrong_signature(self):
        token = jwt.encode({"sub": "user-1", "role": "admin", "exp": 9999999999}, "other-key", algorithm="HS256")
        with self.assertRaises(AuthenticationError):
            decode_access_token(token)

    def test_garbage_token(self):
        with self.assertRaises(AuthenticationError):
            decode_access_token("not.a.token")

    def test_missing_role_claim(self):
        settings = get_settings()
        token = jwt.encode({"sub": "user-1", "exp": 9999999999}, settings.secret_key, algorithm=settings.algorithm)
        with self.assertRaises(AuthenticationError) as ctx:
            decode_access_token(token)
        self.assertEqual(ctx.exception.message, "Invalid token claims")


class TestPolicies(unittest.TestCase):

    def test_managers_may_update_users(self):
        for role in ("admin", "staff"):
            check_policy(POLICIES["users:update"], Principal("u1", None, role))

    def test_unknown_role_is_denied(self):
        with self.assertRaises(PermissionDeniedError) as ctx:
            check_policy(POLICIES["users:delete"], Principal("u1", None, "viewer"))
        self.assertEqual(ctx.exception.status_code, 403)

    def test_owner_may_change_own_password(self):
        check_policy(POLICIES["users:password"], Principal("u1", None, "viewer"), owner_id="u1")
        with self.assertRaises(PermissionDeniedError):
            check_policy(POLICIES["users:password"], Principal("u1", None, "viewer"), owner_id="u2")

    def test_any_role_may_read(self):
        check_policy(POLICIES["materials:read"], Principal("u1", None, "viewer"))


class TestAuthenticate(RepositoryTestCase):

    async def asyncSetUp(self):
        await super().asyncSetUp()
        self.users = UserRepository(self.session)
        self.user = await self.users.create("Jane Staff", "Jane@Example.com", "Secret123", "staff")

    async def test_success(self):
        user = await authenticate(self.users, "jane@example.com", "Secret123")
        self.assertEqual(user.id, self.user.id)

    async def test_failure_reasons_are_distinct(self):
        with self.assertRaises(AuthenticationError) as unknown:
            await authenticate(self.users, "nobody@example.com", "Secret123")
        with self.assertRaises(AuthenticationError) as wrong:
            await authenticate(self.users, "jane@example.com", "Wrong1234")

        self.assertEqual(unknown.exception.reason, AuthFailure.UNKNOWN_EMAIL)
        self.assertEqual(wrong.exception.reason, AuthFailure.WRONG_PASSWORD)
        self.assertEqual(unknown.exception.message, wrong.exception.message)
        self.assertEqual(unknown.exception.status_code, wrong.exception.status_code)

    async def test_inactive_account(self):
        await self.users.set_active(self.user.id, False)
        with self.assertRaises(InactiveAccountError) as ctx:
            await authenticate(self.users, "jane@example.com", "Secret123")
        self.assertEqual(ctx.exception.reason, AuthFailure.INACTIVE)
        self.assertEqual(ctx.exception.status_code, 403)

        # Deactivated users are still retrievable.
        self.assertFalse((await self.users.get_by_id(self.user.id)).is_active)

    async def test_duplicate_email_conflicts(self):
        with self.assertRaises(ConflictError):
            await self.users.create("Other", "jane@example.com", "Secret123")

    async def test_password_change(self):
        await self.users.update_password(self.user.id, "NewSecret456")
        with self.assertRaises(AuthenticationError):
            await authenticate(self.users, "jane@example.com", "Secret123")
        await authenticate(self.users, "jane@example.com", "NewSecret456")


if __name__ == "__main__":
    unittest.main()
