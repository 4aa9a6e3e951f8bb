"""Root conftest: shared test configuration."""

import os

# Tests never talk to a real database or SMTP relay
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SMTP_USER", "")
os.environ.setdefault("SMTP_PASSWORD", "")
os.environ.pop("ADMIN_API_KEY", None)
os.environ.setdefault("LOG_FORMAT", "text")
