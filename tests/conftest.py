"""
Pytest configuration and fixtures for table inspection tests.
Provides shared row sets and environment isolation.
"""

import logging

import pytest

PNG_HEADER = [0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "property: mark test as property-based test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True)
def clear_inspection_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment variables that change CLI and settings defaults."""
    for key in (
        "INSPECTION_NAME_COLUMNS",
        "INSPECTION_OUTPUT_FORMAT",
        "LOG_LEVEL",
        "LOG_JSON",
        "LOG_FILE",
        "OTLP_ENDPOINT",
        "TRACE_CONSOLE",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def png_payload() -> dict:
    """Canonical binary payload holding a PNG header."""
    return {"type": "Buffer", "data": PNG_HEADER + [0, 0, 0, 13]}


@pytest.fixture
def customer_rows() -> list[dict]:
    """Customer rows with one exact duplicate, a constant column and a duplicated owner."""
    return [
        {"Oid": "Alice\n(ID: 1)", "Email": "alice@example.com", "Country": "VN", "Notes": None},
        {"Oid": "Bob\n(ID: 2)", "Email": "bob@example.com", "Country": "VN", "Notes": None},
        {"Oid": "Alice\n(ID: 1)", "Email": "alice@example.com", "Country": "VN", "Notes": None},
        {"Oid": "bob (ID: 7)", "Email": "robert@example.com", "Country": "VN", "Notes": None},
    ]
