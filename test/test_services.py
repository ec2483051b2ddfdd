"""
Tests for SQL-backed meta storage and post lookup

Runs against an in-memory SQLite database.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.future import select
from sqlalchemy.orm import sessionmaker

from coil import gating
from coil.constants.gating import POST_GATING_META_KEY, TERM_GATING_META_KEY
from coil.database import Base
from coil.models.meta import PostMeta
from coil.models.post import Post
from coil.services.meta_service import MetaService
from coil.services.post_service import PostService

# Test database URL (SQLite in-memory for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)
TestSessionLocal = sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function", autouse=True)
async def setup_database():
    """Create a fresh database for each test function"""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db():
    async with TestSessionLocal() as session:
        yield session


class TestMetaService:
    @pytest.mark.asyncio
    async def test_missing_post_meta(self, db):
        assert await MetaService(db).get_post_meta(42, POST_GATING_META_KEY) is None

    @pytest.mark.asyncio
    async def test_update_inserts_then_replaces(self, db):
        service = MetaService(db)

        await service.update_post_meta(42, POST_GATING_META_KEY, "no")
        await service.update_post_meta(42, POST_GATING_META_KEY, "gate-all")

        assert await service.get_post_meta(42, POST_GATING_META_KEY) == "gate-all"
        result = await db.execute(select(PostMeta).where(PostMeta.post_id == 42))
        assert len(result.scalars().all()) == 1

    @pytest.mark.asyncio
    async def test_post_meta_is_per_post(self, db):
        service = MetaService(db)

        await service.update_post_meta(42, POST_GATING_META_KEY, "no")

        assert await service.get_post_meta(43, POST_GATING_META_KEY) is None

    @pytest.mark.asyncio
    async def test_delete_post_meta(self, db):
        service = MetaService(db)
        await service.update_post_meta(42, POST_GATING_META_KEY, "no")

        await service.delete_post_meta(42, POST_GATING_META_KEY)

        assert await service.get_post_meta(42, POST_GATING_META_KEY) is None

    @pytest.mark.asyncio
    async def test_delete_missing_meta_is_harmless(self, db):
        await MetaService(db).delete_term_meta(7, TERM_GATING_META_KEY)

    @pytest.mark.asyncio
    async def test_term_meta_round_trip(self, db):
        service = MetaService(db)

        await service.update_term_meta(7, TERM_GATING_META_KEY, "gate-all")
        assert await service.get_term_meta(7, TERM_GATING_META_KEY) == "gate-all"

        await service.delete_term_meta(7, TERM_GATING_META_KEY)
        assert await service.get_term_meta(7, TERM_GATING_META_KEY) is None

    @pytest.mark.asyncio
    async def test_post_and_term_meta_are_separate(self, db):
        service = MetaService(db)

        await service.update_post_meta(7, POST_GATING_META_KEY, "no")

        assert await gating.get_term_gating(service, 7) is None
        assert await gating.get_post_gating(service, 7) == "no"


class TestPostService:
    @pytest.mark.asyncio
    async def test_get_post(self, db):
        db.add(Post(id=42, post_type="post", post_name="hello-world", block_editor=False))
        db.add(Post(id=51, post_type="revision", post_name="42-autosave-v1", post_parent=42))
        await db.commit()

        service = PostService(db)
        post = await service.get_post(42)
        autosave = await service.get_post(51)

        assert post.post_name == "hello-world"
        assert post.block_editor is False
        assert not post.is_revision
        assert autosave.is_revision
        assert autosave.is_autosave

    @pytest.mark.asyncio
    async def test_missing_post(self, db):
        assert await PostService(db).get_post(999) is None
