from datetime import date

import pytest

from core.store import reset_repositories


@pytest.fixture(autouse=True)
def fresh_repositories():
    """Every test starts from the seeded records."""
    reset_repositories()
    yield
    reset_repositories()


@pytest.fixture
def today():
    return date(2024, 11, 10)


@pytest.fixture
def htmx_headers():
    return {"HTTP_HX_REQUEST": "true"}
