"""Fixtures for application service tests (in-memory stores)."""

import pytest

from tests.shared.fixtures.factories import Services, build_services


@pytest.fixture
def services(tmp_path) -> Services:
    return build_services(tmp_path / "uploads")
