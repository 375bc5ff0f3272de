"""HTTP surface: pages, content API and contact API."""

import os
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from controller.contact import contact_sessions
from main import ASSETS_DIR, app
from schema.contact import DeliveryResponse

from tests.conftest import VALID_FIELDS as FIELDS


@pytest.fixture
def delivery(monkeypatch):
    fake = AsyncMock()
    fake.send = AsyncMock(return_value=DeliveryResponse(status=200, text="OK"))
    contact_sessions.clear()
    monkeypatch.setattr(contact_sessions, "delivery", fake)
    yield fake
    contact_sessions.clear()


@pytest.fixture
def client(delivery):
    with TestClient(app) as test_client:
        yield test_client


def _fill(client, fields=FIELDS):
    for field, value in fields.items():
        r = client.put(f"/api/v1/contact/fields/{field}", json={"value": value})
        assert r.status_code == 200


# --- pages -----------------------------------------------------------------------


def test_home_is_default_tab(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "Desenvolvedor Full Stack" in r.text
    assert 'class="tab active"' in r.text


@pytest.mark.parametrize(
    "tab, marker",
    [
        ("about", "Abrir CV"),
        ("projects", "Portfólio Nutricionista"),
        ("contact", "Entre em Contato"),
    ],
)
def test_each_tab_renders_its_section(client, tab, marker):
    r = client.get("/", params={"tab": tab})
    assert r.status_code == 200
    assert marker in r.text
    assert f'id="{tab}"' in r.text


def test_unknown_tab_is_not_found(client):
    r = client.get("/", params={"tab": "blog"})
    assert r.status_code == 404
    assert r.json() == {"message": "Tab 'blog' not found"}


def test_html_form_post_sends_and_shows_toast_once(client, delivery):
    r = client.post(
        "/contact",
        data={**FIELDS, "g-recaptcha-response": "abc123"},
        follow_redirects=False,
    )
    assert r.status_code == 303
    assert r.headers["location"] == "/?tab=contact"
    delivery.send.assert_awaited_once()

    page = client.get("/?tab=contact").text
    assert "Mensagem enviada com sucesso!" in page
    assert "Maria Silva" not in page
    assert "Mensagem enviada com sucesso!" not in client.get("/?tab=contact").text


def test_html_form_post_without_captcha_keeps_fields(client, delivery):
    client.post("/contact", data=FIELDS, follow_redirects=False)

    delivery.send.assert_not_awaited()
    page = client.get("/?tab=contact").text
    assert "Por favor, complete o captcha" in page
    assert 'value="Maria Silva"' in page


def test_html_form_post_shows_inline_errors(client, delivery):
    client.post(
        "/contact",
        data={**FIELDS, "email": "maria", "g-recaptcha-response": "abc123"},
        follow_redirects=False,
    )

    delivery.send.assert_not_awaited()
    page = client.get("/?tab=contact").text
    assert '<p class="field-error">Por favor, insira um email válido</p>' in page


# --- content API -----------------------------------------------------------------


def test_content_tabs(client):
    r = client.get("/api/v1/content/tabs")
    assert [tab["id"] for tab in r.json()] == ["home", "about", "projects", "contact"]


def test_content_projects_and_skills(client):
    projects = client.get("/api/v1/content/projects").json()
    assert len(projects) == 3
    assert "EmailJs" in projects[0]["tech"]

    skills = client.get("/api/v1/content/skills").json()
    assert [group["category"] for group in skills] == [
        "frontend", "backend", "frameworks", "others"]


def test_content_profile(client):
    profile = client.get("/api/v1/content/profile").json()
    assert profile["name"] == "Kauhan Hernandes"


# --- contact API -----------------------------------------------------------------


def test_contact_state_starts_empty(client):
    r = client.get("/api/v1/contact")
    assert r.json() == {
        "name": "",
        "email": "",
        "message": "",
        "status": "idle",
        "verified": False,
        "errors": {},
    }


def test_update_field_round_trip(client):
    _fill(client)
    state = client.get("/api/v1/contact").json()
    assert {k: state[k] for k in FIELDS} == FIELDS


def test_update_unknown_field_is_rejected(client):
    r = client.put("/api/v1/contact/fields/phone", json={"value": "123"})
    assert r.status_code == 400
    assert r.json() == {"message": "Unknown contact field 'phone'"}


def test_update_field_requires_value(client):
    r = client.put("/api/v1/contact/fields/name", json={})
    assert r.status_code == 422
    assert r.json()["message"].startswith("Invalid value")


def test_verification_record_and_reset(client):
    r = client.post("/api/v1/contact/verification",
                    json={"g-recaptcha-response": "abc123"})
    assert r.json()["verified"] is True

    r = client.delete("/api/v1/contact/verification")
    assert r.json()["verified"] is False


def test_submit_success(client, delivery):
    _fill(client)

    r = client.post("/api/v1/contact/submit", json={"g-recaptcha-response": "abc123"})

    body = r.json()
    assert r.status_code == 200
    assert body["outcome"]["status"] == "succeeded"
    assert body["notifications"] == [
        {"level": "success", "message": "Mensagem enviada com sucesso!"}]
    assert body["form"]["name"] == ""
    assert body["form"]["verified"] is False
    payload = delivery.send.await_args.args[2]
    assert payload.from_email == "maria@example.com"


def test_submit_uses_previously_recorded_token(client, delivery):
    _fill(client)
    client.post("/api/v1/contact/verification", json={"token": "abc123"})

    body = client.post("/api/v1/contact/submit", json={}).json()

    assert body["outcome"]["status"] == "succeeded"
    assert delivery.send.await_args.args[2].recaptcha_response == "abc123"


def test_submit_without_token(client, delivery):
    _fill(client)

    body = client.post("/api/v1/contact/submit", json={}).json()

    assert body["outcome"] == {
        "status": "failed", "reason": "verification_missing", "errors": {}}
    assert body["notifications"][0]["level"] == "error"
    delivery.send.assert_not_awaited()


def test_submit_delivery_error_keeps_form(client, delivery):
    delivery.send.side_effect = ConnectionError("network unreachable")
    _fill(client)

    body = client.post("/api/v1/contact/submit",
                       json={"g-recaptcha-response": "abc123"}).json()

    assert body["outcome"]["reason"] == "delivery"
    assert body["notifications"] == [
        {"level": "error", "message": "Erro ao enviar mensagem. Tente novamente."}]
    assert body["form"]["name"] == "Maria Silva"
    assert body["form"]["status"] == "failed"


def test_sessions_are_isolated(delivery):
    with TestClient(app) as first, TestClient(app) as second:
        _fill(first)
        assert second.get("/api/v1/contact").json()["name"] == ""
        assert first.get("/api/v1/contact").json()["name"] == "Maria Silva"


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_upstream_error_detail_is_not_exposed():
    from unittest.mock import MagicMock

    from error import DeliveryFailureError
    from handler import server_error_handler

    request = MagicMock()
    request.method = "POST"
    request.url.path = "/api/v1/contact/submit"

    response = server_error_handler(request, DeliveryFailureError("smtp password wrong"))

    assert response.status_code == 502
    assert b"smtp password" not in response.body


def test_html_form_message_with_crlf_counts_line_breaks_once(client, delivery):
    # 1000 characters as the textarea counts them, 1004 once posted with CRLF
    message = ("x" * 199 + "\r\n") * 5

    client.post(
        "/contact",
        data={**FIELDS, "message": message, "g-recaptcha-response": "abc123"},
        follow_redirects=False,
    )

    delivery.send.assert_awaited_once()
    sent = delivery.send.await_args.args[2].message
    assert sent == ("x" * 199 + "\n") * 5
    assert len(sent) == 1000


def test_html_form_short_message_with_crlf_is_still_rejected(client, delivery):
    client.post(
        "/contact",
        data={**FIELDS, "message": "ola\r\nola", "g-recaptcha-response": "abc123"},
        follow_redirects=False,
    )

    delivery.send.assert_not_awaited()


@pytest.fixture
def asset_file():
    path = os.path.join(ASSETS_DIR, "home", "pytest-asset.txt")
    with open(path, "w") as f:
        f.write("asset")
    yield "/imgs/home/pytest-asset.txt"
    os.remove(path)


def test_profile_assets_are_served(client, asset_file):
    r = client.get(asset_file)
    assert r.status_code == 200
    assert r.text == "asset"
