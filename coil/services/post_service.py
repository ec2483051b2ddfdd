from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from coil.models.post import Post


class PostService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_post(self, post_id: int) -> Post | None:
        result = await self.db.execute(select(Post).where(Post.id == post_id))
        return result.scalars().first()
