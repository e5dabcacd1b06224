# airport_ops/test_pages.py

import json
import re


def test_pages_redirect_to_login_without_session(client):
    for path in ("/", "/flights", "/passengers"):
        resp = client.get(path, follow_redirects=False)
        assert resp.status_code == 303
        assert resp.headers["location"] == "/login"


def test_login_page(client):
    resp = client.get("/login")
    assert resp.status_code == 200
    assert 'id="login-form"' in resp.text
    assert 'id="register-form"' in resp.text


def test_login_page_redirects_when_signed_in(auth_client):
    resp = auth_client.get("/login", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/"


def test_dashboard(auth_client):
    resp = auth_client.get("/")
    assert resp.status_code == 200
    for element in ("chart-flight-status", "chart-passengers", "chart-daily-traffic",
                    "chart-employee-roles", "recent-flights", "top-ten-toggle"):
        assert f'id="{element}"' in resp.text
    assert "admin" in resp.text


def test_entity_pages_embed_their_config(auth_client):
    for resource, column in (("flights", "flightNumber"), ("gates", "gateNumber"),
                             ("employees", "role"), ("passengers", "checkedIn")):
        resp = auth_client.get(f"/{resource}")
        assert resp.status_code == 200
        match = re.search(r'<script id="page-config" type="application/json">(.*?)</script>', resp.text, re.S)
        config = json.loads(match.group(1))
        assert config["resource"] == resource
        assert column in [c["key"] for c in config["columns"]]


def test_unknown_page(auth_client):
    resp = auth_client.get("/runways")
    assert resp.status_code == 404


def test_static_assets(client):
    for path in ("/static/js/api.js", "/static/js/entity-page.js", "/static/js/dashboard.js", "/static/css/app.css"):
        assert client.get(path).status_code == 200
