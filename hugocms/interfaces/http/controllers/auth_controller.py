# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, redirect, request
from pydantic import ValidationError

from hugocms.application.use_cases.users import LoginUserUseCase, LogoutUserUseCase
from hugocms.domain.users.exceptions import InvalidCredentialsError
from hugocms.infrastructure.audit import AuditAction, audit_log
from hugocms.infrastructure.rate_limiter import AUTH_BUCKET
from hugocms.interfaces.http.dto.auth import LoginRequestDTO
from hugocms.interfaces.http.session_auth import clear_token, current_token, store_token
from hugocms.shared.logging import logger
from hugocms.shared.middleware.rate_limit import limit_blueprint, rate_limit
from hugocms.utils.http import client_ip

URL_PREFIX = "/cms"
LOGIN_PAGE = f"{URL_PREFIX}/login"
LOGIN_FAILED_PAGE = f"{LOGIN_PAGE}?error=1"
DASHBOARD_PAGE = f"{URL_PREFIX}/dashboard"


def _login_payload() -> dict:
    if request.is_json:
        return request.get_json(silent=True) or {}
    return request.form.to_dict()


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
    ) -> None:
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case

    @rate_limit(AUTH_BUCKET)
    def login(self) -> Response:
        ip_address = client_ip()
        try:
            dto = LoginRequestDTO.model_validate(_login_payload())
        except ValidationError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"error": "malformed_request"},
                success=False,
            )
            return redirect(LOGIN_FAILED_PAGE)

        try:
            token = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError as exc:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"username": dto.username, "reason": exc.reason.value},
                success=False,
            )
            return redirect(LOGIN_FAILED_PAGE)

        store_token(token)
        audit_log(
            AuditAction.LOGIN_SUCCESS,
            ip_address=ip_address,
            details={"username": dto.username},
        )
        logger.info(f"auth.login: ok username={dto.username}")
        return redirect(DASHBOARD_PAGE)

    def logout(self) -> Response:
        self._logout_use_case.execute(current_token())
        clear_token()
        audit_log(AuditAction.LOGOUT, ip_address=client_ip())
        logger.info("auth.logout: ok")
        return redirect(LOGIN_PAGE)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix=URL_PREFIX)
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["GET"])
        return limit_blueprint(bp)
