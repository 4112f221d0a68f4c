"""Unit tests for the ArticleService."""

import logging
from datetime import date, datetime, timezone
from pathlib import Path

import pytest

from newsroom.application.interfaces import (
    ArticleRepository,
    CategoryRepository,
    ThumbnailRepository,
    TransactionHandle,
    UserRepository,
)
from newsroom.application.schemas import ArticleCreate, ArticleWithLinkCreate
from newsroom.application.services import ArticleService, CategoryService
from newsroom.domain.entities import Article, ArticleDraft, Category, Requester, Thumbnail, User
from newsroom.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from newsroom.infrastructure.storage.thumbnail_storage import LocalThumbnailStorage, UploadedImage


# ── Fakes ────────────────────────────────────────────────────────────

class FakeStore:
    """Committed rows shared by every fake transaction."""

    def __init__(self):
        self.articles: dict[int, Article] = {}
        self.thumbnails: dict[int, Thumbnail] = {}
        self.next_id = 1

    def allocate_id(self) -> int:
        value = self.next_id
        self.next_id += 1
        return value


class FakeArticleRepository(ArticleRepository):
    """Reads committed articles from the shared store."""

    def __init__(self, store: FakeStore):
        self._store = store

    async def get_by_id(self, article_id: int) -> Article | None:
        return self._store.articles.get(article_id)

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Article]:
        articles = sorted(self._store.articles.values(), key=lambda a: a.id, reverse=True)
        return articles[skip : skip + limit]

    async def create(self, article: Article) -> Article:
        raise AssertionError("articles must be written through a transaction")


class StagedArticleRepository(ArticleRepository):

    def __init__(self, tx: "FakeTransaction", events: list[str]):
        self._tx = tx
        self._events = events

    async def get_by_id(self, article_id: int) -> Article | None:
        return self._tx.staged_articles.get(article_id)

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[Article]:
        return list(self._tx.staged_articles.values())[skip : skip + limit]

    async def create(self, article: Article) -> Article:
        self._events.append("article")
        article.id = self._tx.store.allocate_id()
        self._tx.staged_articles[article.id] = article
        return article


class StagedThumbnailRepository(ThumbnailRepository):

    def __init__(self, tx: "FakeTransaction", events: list[str]):
        self._tx = tx
        self._events = events

    async def create(self, thumbnail: Thumbnail) -> Thumbnail:
        self._events.append("thumbnail")
        thumbnail.id = self._tx.store.allocate_id()
        self._tx.staged_thumbnails[thumbnail.id] = thumbnail
        return thumbnail


class FakeTransaction(TransactionHandle):
    """Stages writes until commit; records commit/rollback/release calls."""

    def __init__(self, store: FakeStore, events: list[str]):
        self.store = store
        self.staged_articles: dict[int, Article] = {}
        self.staged_thumbnails: dict[int, Thumbnail] = {}
        self.thumbnails = StagedThumbnailRepository(self, events)
        self.articles = StagedArticleRepository(self, events)
        self.committed = False
        self.rolled_back = False
        self.release_count = 0

    async def commit(self) -> None:
        self.store.thumbnails.update(self.staged_thumbnails)
        self.store.articles.update(self.staged_articles)
        self.committed = True

    async def rollback(self) -> None:
        self.staged_thumbnails.clear()
        self.staged_articles.clear()
        self.rolled_back = True

    async def release(self) -> None:
        self.release_count += 1


class FakeUserRepository(UserRepository):

    def __init__(self, events: list[str], users: list[User] | None = None):
        self._events = events
        self._users = {u.email: u for u in users or []}

    async def get_by_email(self, email: str) -> User | None:
        self._events.append("user")
        return self._users.get(email)

    async def get_by_id(self, user_id: int) -> User | None:
        return next((u for u in self._users.values() if u.id == user_id), None)

    async def create(self, user: User) -> User:
        self._users[user.email] = user
        return user


class FakeCategoryRepository(CategoryRepository):

    def __init__(self, events: list[str], categories: list[Category] | None = None):
        self._events = events
        self._categories = {c.name: c for c in categories or []}

    async def get_by_name(self, name: str) -> Category | None:
        self._events.append("category")
        return self._categories.get(name)

    async def get_all(self) -> list[Category]:
        return list(self._categories.values())

    async def create(self, category: Category) -> Category:
        self._categories[category.name] = category
        return category


# ── Fixtures ─────────────────────────────────────────────────────────

@pytest.fixture
def events() -> list[str]:
    return []


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def transactions() -> list[FakeTransaction]:
    return []


@pytest.fixture
def storage(tmp_path) -> LocalThumbnailStorage:
    return LocalThumbnailStorage(upload_dir=str(tmp_path / "uploads"))


@pytest.fixture
def requester() -> Requester:
    return Requester(id=1, email="editor@example.com", roles=["ADMIN"])


@pytest.fixture
def service(events, store, transactions, storage) -> ArticleService:
    def open_transaction() -> FakeTransaction:
        tx = FakeTransaction(store, events)
        transactions.append(tx)
        return tx

    return ArticleService(
        repository=FakeArticleRepository(store),
        user_repository=FakeUserRepository(
            events, [User(id=1, email="editor@example.com", password_hash="x", roles=["ADMIN"])]
        ),
        category_repository=FakeCategoryRepository(events, [Category(id=7, name="news")]),
        thumbnail_storage=storage,
        transaction_factory=open_transaction,
    )


def _link_dto(**overrides) -> ArticleWithLinkCreate:
    fields = {
        "title": "Worth reading",
        "link": "https://example.com/post",
        "category": "news",
        "thumbnail": "uploads/thumbnail/post.jpg",
    }
    fields.update(overrides)
    return ArticleWithLinkCreate(**fields)


# ── filter_date ──────────────────────────────────────────────────────

def test_filter_date_pads_month_and_day():
    assert ArticleService.filter_date(date(2024, 3, 5)) == "2024.03.05"


def test_filter_date_accepts_datetime():
    value = datetime(1999, 12, 31, 23, 59, tzinfo=timezone.utc)
    assert ArticleService.filter_date(value) == "1999.12.31"


# ── Thumbnails ───────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_save_thumbnail_image_writes_under_thumbnail_dir(service: ArticleService):
    path = await service.save_thumbnail_image(UploadedImage(filename="x.jpg", content=b"jpeg-bytes"))

    assert path.endswith("/thumbnail/x.jpg")
    assert Path(path).read_bytes() == b"jpeg-bytes"


@pytest.mark.asyncio
async def test_create_thumbnail_uses_given_transaction(service: ArticleService, store, events):
    tx = FakeTransaction(store, events)

    thumbnail = await service.create_thumbnail("some/path.png", tx)

    assert thumbnail.id is not None
    assert thumbnail.path == "some/path.png"
    assert tx.staged_thumbnails[thumbnail.id] is thumbnail
    assert not tx.committed
    assert tx.release_count == 0


@pytest.mark.asyncio
async def test_save_article_uses_given_transaction(service: ArticleService, store, events):
    tx = FakeTransaction(store, events)
    draft = ArticleDraft(user_id=1, title="title", category_id=7)

    article = await service.save_article(draft, tx)

    assert article.id is not None
    assert article.title == "title"
    assert article.user_id == 1
    assert tx.staged_articles[article.id] is article
    assert not tx.committed


@pytest.mark.asyncio
async def test_save_article_logs_article_stage(service: ArticleService, store, events, caplog):
    caplog.set_level(logging.INFO, logger="ArticleService")
    tx = FakeTransaction(store, events)

    await service.save_article(ArticleDraft(user_id=1, title="title", category_id=7), tx)

    assert "[ARTICLE]" in caplog.text


# ── Lookups ──────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_find_category_by_name_is_exact(service: ArticleService):
    assert (await service.find_category_by_name("news")).id == 7
    assert await service.find_category_by_name("News") is None


@pytest.mark.asyncio
async def test_find_one_by_id_returns_none_when_missing(service: ArticleService):
    assert await service.find_one_by_id(999) is None


# ── create_article_with_link ─────────────────────────────────────────

@pytest.mark.asyncio
async def test_create_article_with_link(service: ArticleService, requester, store, events, transactions):
    result = await service.create_article_with_link(_link_dto(), requester)

    assert result is True
    assert events == ["user", "category", "thumbnail", "article"]

    [tx] = transactions
    assert tx.committed
    assert tx.release_count == 1

    [thumbnail] = store.thumbnails.values()
    [article] = store.articles.values()
    assert thumbnail.path == "uploads/thumbnail/post.jpg"
    assert article.thumbnail_id == thumbnail.id
    assert article.category_id == 7
    assert article.user_id == 1
    assert article.link == "https://example.com/post"

    assert await service.find_one_by_id(article.id) is article


@pytest.mark.asyncio
async def test_create_article_with_link_unknown_user_stops_early(
    service: ArticleService, events, transactions
):
    stranger = Requester(id=2, email="nobody@example.com", roles=["ADMIN"])

    with pytest.raises(EntityNotFoundError):
        await service.create_article_with_link(_link_dto(), stranger)

    assert events == ["user"]
    assert transactions == []


@pytest.mark.asyncio
async def test_create_article_with_link_unknown_category_stops_early(
    service: ArticleService, requester, events, transactions
):
    with pytest.raises(EntityNotFoundError, match="Category 'sports' not found"):
        await service.create_article_with_link(_link_dto(category="sports"), requester)

    assert events == ["user", "category"]
    assert transactions == []


@pytest.mark.asyncio
async def test_create_article_with_link_rolls_back_both_rows(
    service: ArticleService, requester, store, events, transactions
):
    async def failing_save(draft, tx):
        raise RuntimeError("insert failed")

    service.save_article = failing_save

    with pytest.raises(RuntimeError, match="insert failed"):
        await service.create_article_with_link(_link_dto(), requester)

    [tx] = transactions
    assert events == ["user", "category", "thumbnail"]
    assert tx.rolled_back
    assert not tx.committed
    assert tx.release_count == 1
    assert store.thumbnails == {}
    assert store.articles == {}


# ── create_article (upload) ──────────────────────────────────────────

@pytest.mark.asyncio
async def test_create_article_with_upload(service: ArticleService, requester, store, transactions):
    data = ArticleCreate(title="Launch", category="news", content="Body")
    image = UploadedImage(filename="launch.png", content=b"png")

    article = await service.create_article(data, image, requester)

    thumbnail = store.thumbnails[article.thumbnail_id]
    assert thumbnail.path.endswith("/thumbnail/launch.png")
    assert Path(thumbnail.path).read_bytes() == b"png"
    assert article.content == "Body"
    assert transactions[0].release_count == 1


@pytest.mark.asyncio
async def test_create_article_without_thumbnail(service: ArticleService, requester, store, events):
    data = ArticleCreate(title="Plain", category="news")

    article = await service.create_article(data, None, requester)

    assert article.thumbnail_id is None
    assert store.thumbnails == {}
    assert events == ["user", "category", "article"]


@pytest.mark.asyncio
async def test_create_article_removes_image_when_transaction_fails(
    service: ArticleService, requester, storage, store
):
    async def failing_save(draft, tx):
        raise RuntimeError("insert failed")

    service.save_article = failing_save
    data = ArticleCreate(title="Doomed", category="news")

    with pytest.raises(RuntimeError):
        await service.create_article(data, UploadedImage("doomed.jpg", b"data"), requester)

    assert not (storage.directory / "doomed.jpg").exists()
    assert store.thumbnails == {}
    assert store.articles == {}


@pytest.mark.asyncio
async def test_create_article_rejects_existing_thumbnail_name(
    service: ArticleService, requester, storage, transactions
):
    (storage.directory / "taken.jpg").write_bytes(b"original")
    data = ArticleCreate(title="Clash", category="news")

    with pytest.raises(DuplicateEntityError):
        await service.create_article(data, UploadedImage("taken.jpg", b"new"), requester)

    assert (storage.directory / "taken.jpg").read_bytes() == b"original"
    assert transactions == []


@pytest.mark.asyncio
async def test_list_articles_newest_first(service: ArticleService, requester):
    await service.create_article_with_link(_link_dto(title="first"), requester)
    await service.create_article_with_link(_link_dto(title="second"), requester)

    titles = [a.title for a in await service.list_articles()]
    assert titles == ["second", "first"]


def test_thumbnail_port_only_declares_create():
    assert ThumbnailRepository.__abstractmethods__ == frozenset({"create"})


# ── CategoryService ──────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_create_category_rejects_blank_name(events):
    categories = CategoryService(FakeCategoryRepository(events))

    with pytest.raises(ValueError):
        await categories.create_category("   ")

    assert await categories.list_categories() == []
