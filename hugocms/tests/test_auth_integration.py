from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from flask.testing import FlaskClient

from hugocms.app import EXTENSION_KEY, create_app
from hugocms.infrastructure.container import Container
from hugocms.shared.config import AppConfig, DatabaseConfig, SecurityConfig


def login(client: FlaskClient, password: str, username: str = "admin"):
    return client.post("/cms/login", data={"username": username, "password": password})


@pytest.fixture()
def logged_in(client: FlaskClient, app_config: AppConfig) -> FlaskClient:
    response = login(client, app_config.admin_password)
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/cms/dashboard")
    return client


def test_publish_flow_writes_row_and_file(
    logged_in: FlaskClient, app_config: AppConfig
) -> None:
    response = logged_in.post(
        "/cms/posts", json={"title": "Hello, World!", "content": "First post body."}
    )

    assert response.status_code == 200
    assert response.get_json() == {"id": 1, "slug": "hello-world"}

    document = (Path(app_config.content_dir) / "hello-world.md").read_text(encoding="utf-8")
    assert document.startswith('---\ntitle: "Hello, World!"\ndate: ')
    assert "\ndraft: false\n---\n\nFirst post body." in document

    listing = logged_in.get("/cms/posts").get_json()
    assert [(p["id"], p["title"], p["slug"]) for p in listing] == [
        (1, "Hello, World!", "hello-world")
    ]
    assert listing[0]["date"].endswith("Z")


def test_duplicate_post_conflicts_and_keeps_file(
    logged_in: FlaskClient, app_config: AppConfig
) -> None:
    logged_in.post("/cms/posts", json={"title": "Hello World", "content": "original"})
    path = Path(app_config.content_dir) / "hello-world.md"
    before = path.read_bytes()

    response = logged_in.post("/cms/posts", json={"title": "hello world!", "content": "other"})

    assert response.status_code == 409
    assert response.get_json() == {"error": "duplicate_slug", "context": {"slug": "hello-world"}}
    assert path.read_bytes() == before
    assert len(logged_in.get("/cms/posts").get_json()) == 1


@pytest.mark.parametrize(
    ("payload", "code"),
    [
        ({"title": "", "content": "body"}, "title_and_content_required"),
        ({"title": "Title"}, "title_and_content_required"),
        ({"title": "???", "content": "body"}, "title_not_sluggable"),
    ],
)
def test_invalid_post_is_rejected(logged_in: FlaskClient, payload: dict, code: str) -> None:
    response = logged_in.post("/cms/posts", json=payload)

    assert response.status_code == 400
    assert response.get_json() == {"error": code}


@pytest.mark.parametrize(
    "payload",
    [{"title": "Hello \ud800", "content": "body"}, {"title": "Ok", "content": "bad \udc80"}],
    ids=["title", "content"],
)
def test_unencodable_text_is_a_client_error(
    logged_in: FlaskClient, app_config: AppConfig, payload: dict
) -> None:
    response = logged_in.post("/cms/posts", json=payload)

    assert response.status_code == 400
    assert response.get_json() == {"error": "invalid_encoding"}
    assert logged_in.get("/cms/posts").get_json() == []
    assert not Path(app_config.content_dir).exists()


def test_whitespace_only_content_is_published(
    logged_in: FlaskClient, app_config: AppConfig
) -> None:
    response = logged_in.post("/cms/posts", json={"title": "T", "content": "   "})

    assert response.status_code == 200
    assert response.get_json() == {"id": 1, "slug": "t"}
    document = (Path(app_config.content_dir) / "t.md").read_text(encoding="utf-8")
    assert document.endswith("---\n\n   ")


def test_publish_failure_reports_partial_write(
    logged_in: FlaskClient, app_config: AppConfig, container: Container
) -> None:
    content_dir = Path(app_config.content_dir)
    content_dir.parent.mkdir(parents=True, exist_ok=True)
    content_dir.write_text("a file where the directory should be", encoding="utf-8")

    response = logged_in.post("/cms/posts", json={"title": "Disk Full", "content": "body"})

    assert response.status_code == 500
    assert response.get_json() == {
        "error": "content_publish_failed",
        "context": {"id": 1, "slug": "disk-full"},
    }
    assert container.post_repository.get_by_slug("disk-full") is not None


def test_wrong_password_redirects_with_error(client: FlaskClient) -> None:
    response = login(client, "definitely-wrong")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/cms/login?error=1")
    assert client.get("/cms/posts").status_code == 401


def test_sixth_login_is_rate_limited_before_credentials(
    client: FlaskClient, container: Container, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls: list[str] = []
    verify = container.credential_store.verify

    def counting_verify(username: str, password: str) -> int:
        calls.append(username)
        return verify(username, password)

    monkeypatch.setattr(container.credential_store, "verify", counting_verify)

    for _ in range(5):
        assert login(client, "wrong").status_code == 302

    response = login(client, "wrong")

    assert response.status_code == 429
    assert response.get_json()["error"] == "rate_limited"
    assert int(response.headers["Retry-After"]) >= 1
    assert len(calls) == 5


def test_logout_invalidates_session(logged_in: FlaskClient, container: Container) -> None:
    with logged_in.session_transaction() as flask_session:
        token = flask_session["token"]
    assert container.session_authority.validate(token) == 1

    response = logged_in.get("/cms/logout")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/cms/login")
    assert container.session_authority.validate(token) is None
    assert logged_in.get("/cms/posts").status_code == 401


def test_bearer_token_authenticates_api_calls(
    client: FlaskClient, container: Container
) -> None:
    token = container.session_authority.login(1)

    response = client.get("/cms/posts", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.get_json() == []


def test_unauthenticated_api_and_pages(client: FlaskClient) -> None:
    listing = client.get("/cms/posts")
    assert listing.status_code == 401
    assert listing.get_json() == {"error": "unauthorized"}

    create = client.post("/cms/posts", json={"title": "T", "content": "C"})
    assert create.status_code == 401

    dashboard = client.get("/cms/dashboard")
    assert dashboard.status_code == 302
    assert dashboard.headers["Location"].endswith("/cms/login")


def test_static_pages_and_health(logged_in: FlaskClient, app_config: AppConfig) -> None:
    public = Path(app_config.public_dir)
    public.mkdir(parents=True, exist_ok=True)
    (public / "dashboard.html").write_text("<h1>dashboard</h1>", encoding="utf-8")

    dashboard = logged_in.get("/cms/dashboard")
    assert dashboard.status_code == 200
    assert b"dashboard" in dashboard.data
    assert logged_in.get("/cms/login").status_code == 404

    health = logged_in.get("/cms/health")
    assert health.status_code == 200
    assert health.get_json() == {"ok": True, "database": "ok"}


def test_security_headers_present(client: FlaskClient) -> None:
    response = client.get("/cms/health")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] in ("DENY", "SAMEORIGIN")


@pytest.fixture()
def tight_client(tmp_path: Path) -> Iterator[tuple[FlaskClient, Container]]:
    config = AppConfig(
        SESSION_SECRET="test-session-secret",
        ADMIN_PASSWORD="s3cret-admin-pass",
        CONTENT_DIR=tmp_path / "content" / "posts",
        PUBLIC_DIR=tmp_path / "public",
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'tight.sqlite'}"),
        security=SecurityConfig(ENABLE_RATE_LIMIT=True, RL_GENERAL_LIMIT=3),
    )
    flask_app = create_app(config)
    flask_app.config.update(TESTING=True)
    tight_container = flask_app.extensions[EXTENSION_KEY]
    yield flask_app.test_client(), tight_container
    tight_container.engine.dispose()


def test_general_limit_rejects_api_traffic_before_handler(
    tight_client: tuple[FlaskClient, Container], monkeypatch: pytest.MonkeyPatch
) -> None:
    client, tight_container = tight_client
    token = tight_container.session_authority.login(1)
    headers = {"Authorization": f"Bearer {token}"}
    calls: list[int] = []
    execute = tight_container.list_posts_use_case.execute

    def counting_execute():
        calls.append(1)
        return execute()

    monkeypatch.setattr(tight_container.list_posts_use_case, "execute", counting_execute)

    for _ in range(3):
        assert client.get("/cms/posts", headers=headers).status_code == 200

    response = client.get("/cms/posts", headers=headers)

    assert response.status_code == 429
    assert response.get_json()["context"]["bucket"] == "general"
    assert len(calls) == 3


def test_login_counts_against_general_bucket(
    tight_client: tuple[FlaskClient, Container], monkeypatch: pytest.MonkeyPatch
) -> None:
    client, tight_container = tight_client
    calls: list[str] = []
    verify = tight_container.credential_store.verify

    def counting_verify(username: str, password: str) -> int:
        calls.append(username)
        return verify(username, password)

    monkeypatch.setattr(tight_container.credential_store, "verify", counting_verify)

    for _ in range(3):
        assert login(client, "wrong").status_code == 302

    response = login(client, "wrong")

    assert response.status_code == 429
    assert response.get_json()["context"]["bucket"] == "general"
    assert len(calls) == 3
