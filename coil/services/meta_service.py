"""
Post and term meta storage.

One row per (entity id, meta key); writes replace the existing value.
"""

import logging

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from coil.models.meta import PostMeta, TermMeta

logger = logging.getLogger(__name__)


class MetaService:
    def __init__(self, db: AsyncSession):
        self.db = db

    # ── Post meta ─────────────────────────────────────────────────────────────

    async def get_post_meta(self, post_id: int, meta_key: str) -> str | None:
        result = await self.db.execute(
            select(PostMeta.meta_value).where(PostMeta.post_id == post_id, PostMeta.meta_key == meta_key)
        )
        return result.scalar_one_or_none()

    async def update_post_meta(self, post_id: int, meta_key: str, meta_value: str) -> None:
        result = await self.db.execute(
            select(PostMeta).where(PostMeta.post_id == post_id, PostMeta.meta_key == meta_key)
        )
        row = result.scalars().first()
        if row is None:
            self.db.add(PostMeta(post_id=post_id, meta_key=meta_key, meta_value=meta_value))
        else:
            row.meta_value = meta_value
        await self.db.commit()
        logger.debug(f"Post meta {meta_key} updated for post {post_id}")

    async def delete_post_meta(self, post_id: int, meta_key: str) -> None:
        await self.db.execute(delete(PostMeta).where(PostMeta.post_id == post_id, PostMeta.meta_key == meta_key))
        await self.db.commit()
        logger.debug(f"Post meta {meta_key} deleted for post {post_id}")

    # ── Term meta ─────────────────────────────────────────────────────────────

    async def get_term_meta(self, term_id: int, meta_key: str) -> str | None:
        result = await self.db.execute(
            select(TermMeta.meta_value).where(TermMeta.term_id == term_id, TermMeta.meta_key == meta_key)
        )
        return result.scalar_one_or_none()

    async def update_term_meta(self, term_id: int, meta_key: str, meta_value: str) -> None:
        result = await self.db.execute(
            select(TermMeta).where(TermMeta.term_id == term_id, TermMeta.meta_key == meta_key)
        )
        row = result.scalars().first()
        if row is None:
            self.db.add(TermMeta(term_id=term_id, meta_key=meta_key, meta_value=meta_value))
        else:
            row.meta_value = meta_value
        await self.db.commit()
        logger.debug(f"Term meta {meta_key} updated for term {term_id}")

    async def delete_term_meta(self, term_id: int, meta_key: str) -> None:
        await self.db.execute(delete(TermMeta).where(TermMeta.term_id == term_id, TermMeta.meta_key == meta_key))
        await self.db.commit()
        logger.debug(f"Term meta {meta_key} deleted for term {term_id}")
