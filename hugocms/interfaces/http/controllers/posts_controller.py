# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from hugocms.application.services.sessions import SessionAuthority
from hugocms.application.use_cases.posts import (
    CreatePostInput,
    CreatePostUseCase,
    ListPostsUseCase,
)
from hugocms.domain.posts import DuplicateSlugError, InvalidPostError, PartialPublishError
from hugocms.domain.users.exceptions import UnauthenticatedError
from hugocms.infrastructure.audit import AuditAction, audit_log
from hugocms.interfaces.http.dto.posts import CreatePostRequestDTO
from hugocms.interfaces.http.session_auth import authenticate, current_token
from hugocms.shared.errors import InfrastructureError
from hugocms.shared.errors.validation import raise_validation_error
from hugocms.shared.logging import logger
from hugocms.shared.middleware.rate_limit import limit_blueprint
from hugocms.utils.http import client_ip


class PostsController:
    def __init__(
        self,
        *,
        create_use_case: CreatePostUseCase,
        list_use_case: ListPostsUseCase,
        sessions: SessionAuthority,
    ) -> None:
        self._create_use_case = create_use_case
        self._list_use_case = list_use_case
        self._sessions = sessions

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__, url_prefix="/cms")
        bp.add_url_rule("/posts", view_func=self.list_posts, methods=["GET"])
        bp.add_url_rule("/posts", view_func=self.create, methods=["POST"])
        return limit_blueprint(bp)

    def _require_user(self) -> int:
        user_id = authenticate(self._sessions)
        if user_id is None:
            raise UnauthenticatedError()
        return user_id

    def list_posts(self) -> Response:
        t0 = perf_counter()
        user_id = self._require_user()
        try:
            items = [post.to_dict() for post in self._list_use_case.execute()]
        except Exception as exc:
            logger.exception(f"posts.list: err (user_id={user_id})")
            raise InfrastructureError(code="database_error") from exc
        dt = (perf_counter() - t0) * 1000
        logger.info(f"posts.list: ok (user_id={user_id}, n={len(items)}, dt_ms={dt:.0f})")
        return jsonify(items)

    def create(self) -> Response:
        user_id = self._require_user()
        try:
            dto = CreatePostRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            result = self._create_use_case.execute(
                current_token(), CreatePostInput(title=dto.title, content=dto.content)
            )
        except (InvalidPostError, DuplicateSlugError) as exc:
            audit_log(
                AuditAction.POST_REJECTED,
                user_id=user_id,
                ip_address=client_ip(),
                details={"title": dto.title, "error": exc.code},
                success=False,
            )
            raise
        except PartialPublishError as exc:
            audit_log(
                AuditAction.POST_PUBLISH_FAILED,
                user_id=user_id,
                ip_address=client_ip(),
                details={"id": exc.post_id, "slug": exc.slug},
                success=False,
            )
            raise

        audit_log(
            AuditAction.POST_CREATED,
            user_id=user_id,
            ip_address=client_ip(),
            details={"id": result.id, "slug": result.slug},
        )
        return jsonify(result.to_dict())
