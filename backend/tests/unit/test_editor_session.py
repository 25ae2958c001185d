"""Tests for the API client and editor session."""

import json

import httpx
import pytest
import respx

from portfolio_builder.editor import ApiError, EditorSession, EditorStore, PortfolioClient

BASE = "http://portfolio.test"


def portfolio_payload(portfolio_id=7, name="Untitled Portfolio", components=None, updated_at="2026-01-01T00:00:00"):
    return {
        "id": portfolio_id,
        "userId": "u1",
        "name": name,
        "layout": {"components": components or []},
        "isPublished": False,
        "publishedUrl": None,
        "siteName": None,
        "createdAt": "2026-01-01T00:00:00",
        "updatedAt": updated_at,
    }


@pytest.fixture
def session():
    client = PortfolioClient(BASE, token="tok")
    yield EditorSession(EditorStore(), client)
    client.close()


@pytest.mark.unit
def test_client_initialization():
    client = PortfolioClient("http://localhost:5000/", timeout=3.0)

    assert client.base_url == "http://localhost:5000"
    assert client.timeout == 3.0
    assert client.token is None


@pytest.mark.unit
@respx.mock
def test_login_stores_token():
    respx.post(f"{BASE}/api/login").mock(
        return_value=httpx.Response(200, json={"user": {"id": "u1"}, "accessToken": "abc"})
    )
    client = PortfolioClient(BASE)

    user = client.login("a@b.c", "pw")

    assert user == {"id": "u1"}
    assert client.token == "abc"


@pytest.mark.unit
@respx.mock
def test_error_response_raises_api_error():
    respx.get(f"{BASE}/api/portfolios/3").mock(
        return_value=httpx.Response(404, json={"error": "NotFound", "message": "Portfolio not found"})
    )
    client = PortfolioClient(BASE, token="tok")

    with pytest.raises(ApiError) as exc_info:
        client.get_portfolio(3)

    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Portfolio not found"


@pytest.mark.unit
@respx.mock
def test_unauthorized_flag():
    respx.get(f"{BASE}/api/portfolios").mock(return_value=httpx.Response(401, json={"message": "Unauthorized"}))

    with pytest.raises(ApiError) as exc_info:
        PortfolioClient(BASE).list_portfolios()

    assert exc_info.value.is_unauthorized


@pytest.mark.unit
@respx.mock
def test_open_loads_store(session):
    components = [{"id": "a", "type": "hero", "props": {"title": "Hi"}}]
    route = respx.get(f"{BASE}/api/portfolios/7").mock(
        return_value=httpx.Response(200, json=portfolio_payload(name="Loaded", components=components))
    )
    session.store.select_component("stale")

    session.open(7)

    assert route.calls.last.request.headers["Authorization"] == "Bearer tok"
    assert session.store.components == components
    assert session.store.portfolio_name == "Loaded"
    assert session.store.portfolio_id == 7
    assert session.store.selected_component_id is None


@pytest.mark.unit
@respx.mock
def test_first_save_creates_then_updates(session):
    create_route = respx.post(f"{BASE}/api/portfolios").mock(
        return_value=httpx.Response(201, json=portfolio_payload(updated_at="2026-01-01T00:00:01"))
    )
    update_route = respx.put(f"{BASE}/api/portfolios/7").mock(
        return_value=httpx.Response(200, json=portfolio_payload(updated_at="2026-01-01T00:00:02"))
    )
    hero = session.store.add_from_registry("hero")

    session.save()

    assert create_route.called
    assert session.store.portfolio_id == 7
    sent = json.loads(create_route.calls.last.request.content)
    assert sent["layout"]["components"][0]["id"] == hero["id"]

    session.store.update_component(hero["id"], {"title": "Changed"})
    session.save()

    request = update_route.calls.last.request
    assert request.headers["If-Unmodified-Since"] == "2026-01-01T00:00:01"
    assert json.loads(request.content)["layout"]["components"][0]["props"]["title"] == "Changed"
    assert session.last_updated_at == "2026-01-01T00:00:02"
    assert session.store.is_saving is False


@pytest.mark.unit
@respx.mock
def test_stale_save_raises_conflict(session):
    respx.put(f"{BASE}/api/portfolios/7").mock(
        return_value=httpx.Response(409, json={"error": "Conflict", "message": "Conflict detected."})
    )
    session.store.load_portfolio([], "Mine", 7)
    session.last_updated_at = "2026-01-01T00:00:00"

    with pytest.raises(ApiError) as exc_info:
        session.save()

    assert exc_info.value.is_conflict
    assert session.store.is_saving is False
    assert session.last_updated_at == "2026-01-01T00:00:00"


@pytest.mark.unit
@respx.mock
def test_publish_saves_unsaved_document_first(session):
    respx.post(f"{BASE}/api/portfolios").mock(
        return_value=httpx.Response(201, json=portfolio_payload())
    )
    published = portfolio_payload(updated_at="2026-01-01T00:00:05")
    published.update(isPublished=True, publishedUrl="https://mine.vercel.app", siteName="mine")
    publish_route = respx.post(f"{BASE}/api/portfolios/7/publish").mock(
        return_value=httpx.Response(200, json=published)
    )

    result = session.publish("mine")

    assert json.loads(publish_route.calls.last.request.content) == {"siteName": "mine"}
    assert result["publishedUrl"] == "https://mine.vercel.app"
    assert session.last_updated_at == "2026-01-01T00:00:05"


@pytest.mark.unit
def test_close_clears_store(session):
    session.store.load_portfolio([{"id": "a", "type": "hero", "props": {}}], "Mine", 7)
    session.last_updated_at = "x"

    session.close()

    assert session.store.components == []
    assert session.store.portfolio_id is None
    assert session.last_updated_at is None
