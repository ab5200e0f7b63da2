"""
Shared fixtures for the test suite.
"""
import asyncio
import unittest

from fastapi.testclient import TestClient

from surplus_sales.database import AsyncSessionLocal, drop_db, init_db
from surplus_sales.main import app


async def reset_database():
    await drop_db()
    await init_db()


class RepositoryTestCase(unittest.IsolatedAsyncioTestCase):
    """Fresh schema and an open session for each test."""

    async def asyncSetUp(self):
        await reset_database()
        self.session = AsyncSessionLocal()

    async def asyncTearDown(self):
        await self.session.close()


class ApiTestCase(unittest.TestCase):
    """Runs the app in-process against a fresh schema."""

    API = "/api"

    def setUp(self):
        asyncio.run(reset_database())
        self.client = TestClient(app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

    def register(self, email="admin@example.com", password="Secret123", role="admin", full_name="Admin User"):
        return self.client.post(
            f"{self.API}/users/register",
            json={"fullName": full_name, "email": email, "password": password, "role": role},
        )

    def auth_headers(self, email="admin@example.com", password="Secret123", role="admin"):
        response = self.register(email=email, password=password, role=role)
        self.assertEqual(response.status_code, 201, response.text)
        return {"Authorization": f"Bearer {response.json()['token']}"}
