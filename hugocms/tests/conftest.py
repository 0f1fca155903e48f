from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "hugocms-tests.log"))
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("ADMIN_PASSWORD", "admin-password")

from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from hugocms.app import EXTENSION_KEY, create_app  # noqa: E402
from hugocms.infrastructure.container import Container  # noqa: E402
from hugocms.infrastructure.db import (  # noqa: E402
    SessionFactory,
    create_db_engine,
    create_session_factory,
    init_db,
)
from hugocms.shared.config import AppConfig, DatabaseConfig, SecurityConfig  # noqa: E402
from hugocms.tests.fakes import FakeClock  # noqa: E402

ADMIN_PASSWORD = "s3cret-admin-pass"


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        SESSION_SECRET="test-session-secret",
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        CONTENT_DIR=tmp_path / "content" / "posts",
        PUBLIC_DIR=tmp_path / "public",
        database=DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'db.sqlite'}"),
        security=SecurityConfig(ENABLE_RATE_LIMIT=True),
    )


@pytest.fixture()
def app(app_config: AppConfig) -> Iterator[Flask]:
    flask_app = create_app(app_config)
    flask_app.config.update(TESTING=True)
    yield flask_app
    flask_app.extensions[EXTENSION_KEY].engine.dispose()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def container(app: Flask) -> Container:
    return app.extensions[EXTENSION_KEY]


@pytest.fixture()
def session_factory(tmp_path: Path) -> Iterator[SessionFactory]:
    engine = create_db_engine(DatabaseConfig(DATABASE_URL=f"sqlite:///{tmp_path / 'repo.sqlite'}"))
    init_db(engine)
    yield create_session_factory(engine)
    engine.dispose()
