from sqlalchemy import Column, Integer, String, Text, UniqueConstraint

from coil.database import Base


class PostMeta(Base):
    __tablename__ = "post_meta"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    post_id = Column(Integer, nullable=False, index=True)
    meta_key = Column(String(255), nullable=False)
    meta_value = Column(Text, nullable=True)

    __table_args__ = (UniqueConstraint("post_id", "meta_key", name="unique_post_meta_key"),)


class TermMeta(Base):
    __tablename__ = "term_meta"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    term_id = Column(Integer, nullable=False, index=True)
    meta_key = Column(String(255), nullable=False)
    meta_value = Column(Text, nullable=True)

    __table_args__ = (UniqueConstraint("term_id", "meta_key", name="unique_term_meta_key"),)
