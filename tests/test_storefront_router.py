from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from contextlib import ExitStack
import logging
import re
import threading
import time

from fastapi.testclient import TestClient
import pytest

from storefront.api.deps import get_page_origin, get_storefront_backend, get_view_registry
from storefront.api.view_registry import ViewRegistry
from storefront.application.dto.checkout import CheckoutSessionResult
from storefront.domain.entities.google import Location, LocationsView
from storefront.main import app

from fakes import FakeStorefrontBackend


@pytest.fixture
def client_for():
    """Build a started TestClient wired to a given fake backend."""
    with ExitStack() as stack:

        def _client(backend: FakeStorefrontBackend) -> TestClient:
            registry = ViewRegistry(capacity=10)
            app.dependency_overrides[get_storefront_backend] = lambda: backend
            app.dependency_overrides[get_view_registry] = lambda: registry
            app.dependency_overrides[get_page_origin] = lambda: "https://shop.example"
            return stack.enter_context(TestClient(app))

        try:
            yield _client
        finally:
            app.dependency_overrides.clear()


def _view_id(html: str) -> str:
    match = re.search(r'name="view_id" value="([0-9a-f]+)"', html)
    assert match is not None
    return match.group(1)


def test_page_renders_plans_google_and_locations(client_for):
    client = client_for(FakeStorefrontBackend())

    response = client.get("/")

    assert response.status_code == 200
    html = response.text
    assert "System Management" in html
    assert "$19.99" in html
    assert "/month" in html
    assert 'aria-label="$19.99/month"' in html
    assert "Email support" in html
    assert 'value="price_basic_123"' in html
    assert "Connect Google" in html
    assert "Downtown" in html
    assert "DT-01" in html
    assert "Sign in (scaffold)" in html
    assert "No Google account connected." not in html


def test_page_falls_back_when_backend_is_down(client_for):
    client = client_for(FakeStorefrontBackend(failing=("plans", "google", "locations")))

    response = client.get("/")

    assert response.status_code == 200
    html = response.text
    assert "Google OAuth not configured yet." in html
    assert "No Google account connected." in html
    assert 'class="plan"' not in html


def test_page_hides_locations_when_not_connected(client_for):
    backend = FakeStorefrontBackend(
        locations=LocationsView(connected=False, locations=(Location(name="Ghost", store_code="G-1"),)),
    )
    client = client_for(backend)

    html = client.get("/").text

    assert "No Google account connected." in html
    assert "Ghost" not in html


def test_connected_without_locations_shows_no_message(client_for):
    client = client_for(FakeStorefrontBackend(locations=LocationsView(connected=True, locations=())))

    html = client.get("/").text

    assert "No Google account connected." not in html
    assert 'class="location"' not in html


def test_checkout_return_banners(client_for):
    client = client_for(FakeStorefrontBackend())

    assert "Subscription started." in client.get("/?success=true").text
    assert "Checkout canceled." in client.get("/?canceled=true").text


def test_subscribe_redirects_to_checkout(client_for):
    backend = FakeStorefrontBackend()
    client = client_for(backend)
    view_id = _view_id(client.get("/").text)

    response = client.post(
        "/subscribe",
        data={"view_id": view_id, "email": "owner@example.com", "price_id": "price_basic_123"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "https://pay.example/session/123"
    assert backend.checkout_calls[0]["success_url"] == "https://shop.example/?success=true"
    assert backend.checkout_calls[0]["cancel_url"] == "https://shop.example/?canceled=true"


def test_subscribe_without_email_shows_alert(client_for):
    backend = FakeStorefrontBackend()
    client = client_for(backend)
    view_id = _view_id(client.get("/").text)

    response = client.post(
        "/subscribe",
        data={"view_id": view_id, "email": "", "price_id": "price_basic_123"},
        follow_redirects=False,
    )

    assert response.status_code == 200
    assert "Enter your email to continue" in response.text
    assert backend.checkout_calls == []


def test_subscribe_shows_server_detail(client_for):
    backend = FakeStorefrontBackend(checkout=CheckoutSessionResult(url=None, detail="price not found"))
    client = client_for(backend)
    view_id = _view_id(client.get("/").text)

    response = client.post(
        "/subscribe",
        data={"view_id": view_id, "email": "owner@example.com", "price_id": "price_missing"},
        follow_redirects=False,
    )

    assert response.status_code == 200
    assert 'role="alert">price not found<' in response.text
    assert 'value="owner@example.com"' in response.text


def test_subscribe_with_unknown_view_opens_a_new_one(client_for):
    backend = FakeStorefrontBackend()
    client = client_for(backend)

    response = client.post(
        "/subscribe",
        data={"view_id": "missing", "email": "owner@example.com", "price_id": "price_pro_456"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert backend.checkout_calls[0]["price_id"] == "price_pro_456"


def test_healthz():
    client = TestClient(app)

    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def _wait_for(condition, *, timeout: float = 5.0) -> None:
    deadline = time.monotonic() + timeout
    while not condition():
        assert time.monotonic() < deadline, "condition not met in time"
        time.sleep(0.01)


def _submit_twice(client: TestClient, backend: FakeStorefrontBackend, caplog, form: dict) -> list:
    backend.checkout_gate = threading.Event()
    with ThreadPoolExecutor(max_workers=2) as pool:
        first = pool.submit(client.post, "/subscribe", data=form, follow_redirects=False)
        assert backend.checkout_started.wait(timeout=5)
        second = pool.submit(client.post, "/subscribe", data=form, follow_redirects=False)
        _wait_for(lambda: "checkout_blocked" in caplog.text)
        backend.checkout_gate.set()
        return [first.result(timeout=5), second.result(timeout=5)]


def test_double_submit_follows_the_pending_checkout_redirect(client_for, caplog):
    caplog.set_level(logging.INFO)
    backend = FakeStorefrontBackend()
    client = client_for(backend)
    view_id = _view_id(client.get("/").text)

    responses = _submit_twice(
        client,
        backend,
        caplog,
        {"view_id": view_id, "email": "owner@example.com", "price_id": "price_basic_123"},
    )

    assert [response.status_code for response in responses] == [303, 303]
    assert [response.headers["location"] for response in responses] == [
        "https://pay.example/session/123",
        "https://pay.example/session/123",
    ]
    assert len(backend.checkout_calls) == 1


def test_double_submit_shows_the_pending_checkout_alert(client_for, caplog):
    caplog.set_level(logging.INFO)
    backend = FakeStorefrontBackend(checkout=CheckoutSessionResult(url=None, detail="price not found"))
    client = client_for(backend)
    view_id = _view_id(client.get("/").text)

    responses = _submit_twice(
        client,
        backend,
        caplog,
        {"view_id": view_id, "email": "owner@example.com", "price_id": "price_missing"},
    )

    assert [response.status_code for response in responses] == [200, 200]
    assert all('role="alert">price not found<' in response.text for response in responses)
    assert len(backend.checkout_calls) == 1
