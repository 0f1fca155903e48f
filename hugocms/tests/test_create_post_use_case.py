from __future__ import annotations

from datetime import timedelta

import pytest

from hugocms.application.services.sessions import SessionAuthority
from hugocms.application.use_cases.posts import (
    CreatePostInput,
    CreatePostUseCase,
    ListPostsUseCase,
)
from hugocms.domain.posts import DuplicateSlugError, InvalidPostError, PartialPublishError
from hugocms.domain.users import UnauthenticatedError
from hugocms.tests.fakes import (
    FakeClock,
    InMemoryPostRepository,
    InMemorySessionRepository,
    RecordingPublisher,
)


@pytest.fixture()
def sessions(clock: FakeClock) -> SessionAuthority:
    return SessionAuthority(sessions=InMemorySessionRepository(), clock=clock)


@pytest.fixture()
def posts() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture()
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture()
def use_case(
    sessions: SessionAuthority,
    posts: InMemoryPostRepository,
    publisher: RecordingPublisher,
    clock: FakeClock,
) -> CreatePostUseCase:
    return CreatePostUseCase(sessions=sessions, posts=posts, publisher=publisher, clock=clock)


@pytest.fixture()
def token(sessions: SessionAuthority) -> str:
    return sessions.login(1)


def test_create_post_writes_row_and_file(
    use_case: CreatePostUseCase,
    token: str,
    posts: InMemoryPostRepository,
    publisher: RecordingPublisher,
    clock: FakeClock,
) -> None:
    result = use_case.execute(token, CreatePostInput(title="Hello, World!", content="Body"))

    assert result.to_dict() == {"id": 1, "slug": "hello-world"}
    assert posts.get_by_slug("hello-world").date == clock.now
    assert publisher.published["hello-world"] == ("Hello, World!", "Body", clock.now)


@pytest.mark.parametrize("token_value", [None, "", "forged"])
def test_unauthenticated_does_nothing(
    use_case: CreatePostUseCase,
    posts: InMemoryPostRepository,
    publisher: RecordingPublisher,
    token_value: str | None,
) -> None:
    with pytest.raises(UnauthenticatedError):
        use_case.execute(token_value, CreatePostInput(title="T", content="C"))

    assert posts.posts == []
    assert publisher.published == {}


def test_expired_session_is_rejected(
    use_case: CreatePostUseCase, token: str, clock: FakeClock
) -> None:
    clock.advance(hours=24)

    with pytest.raises(UnauthenticatedError):
        use_case.execute(token, CreatePostInput(title="T", content="C"))


@pytest.mark.parametrize(
    ("title", "content"),
    [("", "body"), ("title", ""), ("   ", "body"), ("\n\t", "body")],
)
def test_blank_fields_are_rejected(
    use_case: CreatePostUseCase,
    token: str,
    posts: InMemoryPostRepository,
    title: str,
    content: str,
) -> None:
    with pytest.raises(InvalidPostError) as exc_info:
        use_case.execute(token, CreatePostInput(title=title, content=content))

    assert exc_info.value.code == "title_and_content_required"
    assert exc_info.value.status == 400
    assert posts.posts == []


def test_whitespace_only_content_is_accepted(
    use_case: CreatePostUseCase, token: str, publisher: RecordingPublisher
) -> None:
    result = use_case.execute(token, CreatePostInput(title="Spacer", content="   "))

    assert result.slug == "spacer"
    assert publisher.published["spacer"][1] == "   "


@pytest.mark.parametrize(
    ("title", "content"),
    [("Hello \ud800", "body"), ("Ok", "bad \udc80")],
    ids=["title", "content"],
)
def test_unencodable_text_is_rejected(
    use_case: CreatePostUseCase,
    token: str,
    posts: InMemoryPostRepository,
    publisher: RecordingPublisher,
    title: str,
    content: str,
) -> None:
    with pytest.raises(InvalidPostError) as exc_info:
        use_case.execute(token, CreatePostInput(title=title, content=content))

    assert exc_info.value.code == "invalid_encoding"
    assert exc_info.value.status == 400
    assert posts.posts == []
    assert publisher.published == {}


def test_unsluggable_title_is_rejected(
    use_case: CreatePostUseCase, token: str, posts: InMemoryPostRepository
) -> None:
    with pytest.raises(InvalidPostError) as exc_info:
        use_case.execute(token, CreatePostInput(title="!!!", content="body"))

    assert exc_info.value.code == "title_not_sluggable"
    assert posts.posts == []


def test_duplicate_slug_writes_no_file(
    use_case: CreatePostUseCase, token: str, publisher: RecordingPublisher
) -> None:
    use_case.execute(token, CreatePostInput(title="Hello World", content="first"))

    with pytest.raises(DuplicateSlugError) as exc_info:
        use_case.execute(token, CreatePostInput(title="hello world!", content="second"))

    assert exc_info.value.status == 409
    assert publisher.published["hello-world"][1] == "first"


def test_publish_failure_keeps_row(
    use_case: CreatePostUseCase,
    token: str,
    posts: InMemoryPostRepository,
    publisher: RecordingPublisher,
) -> None:
    publisher.fail = True

    with pytest.raises(PartialPublishError) as exc_info:
        use_case.execute(token, CreatePostInput(title="Broken Disk", content="body"))

    assert exc_info.value.to_dict() == {
        "error": "content_publish_failed",
        "context": {"id": 1, "slug": "broken-disk"},
    }
    assert exc_info.value.status == 500
    assert posts.get_by_slug("broken-disk") is not None


def test_list_posts_newest_first(
    use_case: CreatePostUseCase, token: str, posts: InMemoryPostRepository, clock: FakeClock
) -> None:
    for title in ("First", "Second", "Third"):
        use_case.execute(token, CreatePostInput(title=title, content="x"))
        clock.advance(minutes=1)

    listed = ListPostsUseCase(posts=posts).execute()

    assert [p.slug for p in listed] == ["third", "second", "first"]
    assert listed[0].date - listed[2].date == timedelta(minutes=2)
