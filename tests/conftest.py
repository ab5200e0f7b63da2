"""
Point the application at a throwaway SQLite database before it is imported.
"""
import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="surplus-sales-tests-")

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/test.db"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["LOG_LEVEL"] = "WARNING"
