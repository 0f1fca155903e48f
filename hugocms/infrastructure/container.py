# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sqlalchemy.engine import Engine

from hugocms.application.services.credentials import CredentialStore
from hugocms.application.services.password_hashing import WerkzeugPasswordHasher
from hugocms.application.services.sessions import SessionAuthority
from hugocms.application.use_cases.posts import CreatePostUseCase, ListPostsUseCase
from hugocms.application.use_cases.users import (
    BootstrapAdminUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
)
from hugocms.infrastructure.db import SessionFactory, create_db_engine, create_session_factory
from hugocms.infrastructure.publishing import HugoContentPublisher
from hugocms.infrastructure.rate_limiter import (
    AUTH_BUCKET,
    GENERAL_BUCKET,
    BucketPolicy,
    RateLimiter,
)
from hugocms.infrastructure.repositories.posts import SqlAlchemyPostRepository
from hugocms.infrastructure.repositories.users import (
    SqlAlchemySessionRepository,
    SqlAlchemyUserRepository,
)
from hugocms.infrastructure.state_store import InMemoryStateStore
from hugocms.interfaces.http.controllers.auth_controller import AuthController
from hugocms.interfaces.http.controllers.misc_controller import MiscController
from hugocms.interfaces.http.controllers.posts_controller import PostsController
from hugocms.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def engine(self) -> Engine:
        return create_db_engine(self.config.database)

    @cached_property
    def session_factory(self) -> SessionFactory:
        return create_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def session_repository(self) -> SqlAlchemySessionRepository:
        return SqlAlchemySessionRepository(self.session_factory)

    @cached_property
    def post_repository(self) -> SqlAlchemyPostRepository:
        return SqlAlchemyPostRepository(self.session_factory)

    @cached_property
    def content_publisher(self) -> HugoContentPublisher:
        return HugoContentPublisher(self.config.content_dir, self.config.content_ext)

    @cached_property
    def credential_store(self) -> CredentialStore:
        return CredentialStore(users=self.user_repository, password_hasher=self.password_hasher)

    @cached_property
    def session_authority(self) -> SessionAuthority:
        return SessionAuthority(
            sessions=self.session_repository,
            ttl=timedelta(seconds=self.config.session_ttl),
        )

    @cached_property
    def state_store(self) -> InMemoryStateStore:
        return InMemoryStateStore()

    @cached_property
    def rate_limiter(self) -> RateLimiter | None:
        security = self.config.security
        if not security.enable_rate_limit:
            return None
        return RateLimiter(
            self.state_store,
            {
                GENERAL_BUCKET: BucketPolicy(security.general_limit, security.general_window),
                AUTH_BUCKET: BucketPolicy(security.auth_limit, security.auth_window),
            },
        )

    @cached_property
    def bootstrap_admin_use_case(self) -> BootstrapAdminUseCase:
        return BootstrapAdminUseCase(credentials=self.credential_store)

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(credentials=self.credential_store, sessions=self.session_authority)

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_authority)

    @cached_property
    def create_post_use_case(self) -> CreatePostUseCase:
        return CreatePostUseCase(
            sessions=self.session_authority,
            posts=self.post_repository,
            publisher=self.content_publisher,
        )

    @cached_property
    def list_posts_use_case(self) -> ListPostsUseCase:
        return ListPostsUseCase(posts=self.post_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
        )

    @cached_property
    def posts_controller(self) -> PostsController:
        return PostsController(
            create_use_case=self.create_post_use_case,
            list_use_case=self.list_posts_use_case,
            sessions=self.session_authority,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(
            engine=self.engine,
            public_dir=self.config.public_dir,
            sessions=self.session_authority,
        )
