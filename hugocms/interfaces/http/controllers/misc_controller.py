# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, jsonify, redirect, send_from_directory
from sqlalchemy.engine import Engine

from hugocms.application.services.sessions import SessionAuthority
from hugocms.infrastructure.health import check_database
from hugocms.interfaces.http.session_auth import authenticate
from hugocms.shared.logging import logger
from hugocms.shared.middleware.rate_limit import limit_blueprint


class MiscController:
    """Health probe and the static login/dashboard pages."""

    def __init__(self, *, engine: Engine, public_dir: Path, sessions: SessionAuthority) -> None:
        self._engine = engine
        self._public_dir = Path(public_dir).resolve()
        self._sessions = sessions

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__, url_prefix="/cms")
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule("/login", view_func=self.login_page, methods=["GET"])
        bp.add_url_rule("/dashboard", view_func=self.dashboard_page, methods=["GET"])
        return limit_blueprint(bp)

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            check_database(self._engine)
            status["database"] = "ok"
        except Exception:
            logger.exception("health: database check failed")
            status["ok"] = False
            status["database"] = "error"
        return jsonify(status), 200 if status["ok"] else 503

    def login_page(self):
        return send_from_directory(self._public_dir, "login.html")

    def dashboard_page(self):
        if authenticate(self._sessions) is None:
            return redirect("/cms/login")
        return send_from_directory(self._public_dir, "dashboard.html")
