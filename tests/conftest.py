from __future__ import annotations

import pytest

from fakes import FakeBrowser, FakeStorefrontBackend


@pytest.fixture
def backend() -> FakeStorefrontBackend:
    return FakeStorefrontBackend()


@pytest.fixture
def browser() -> FakeBrowser:
    return FakeBrowser()
