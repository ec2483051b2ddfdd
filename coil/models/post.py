from sqlalchemy import Boolean, Column, ForeignKey, Integer, String

from coil.database import Base


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    post_type = Column(String(20), default="post", nullable=False, index=True)
    post_name = Column(String(200), default="", nullable=False)
    post_parent = Column(Integer, ForeignKey("posts.id"), nullable=True)
    # Whether the post is edited with the block editor
    block_editor = Column(Boolean, default=True, nullable=False)

    @property
    def is_revision(self) -> bool:
        return self.post_type == "revision"

    @property
    def is_autosave(self) -> bool:
        return self.is_revision and f"{self.post_parent}-autosave" in (self.post_name or "")
