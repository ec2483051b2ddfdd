"""add posts and gating meta tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("post_type", sa.String(20), nullable=False, server_default="post"),
        sa.Column("post_name", sa.String(200), nullable=False, server_default=""),
        sa.Column("post_parent", sa.Integer(), nullable=True),
        sa.Column("block_editor", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.ForeignKeyConstraint(["post_parent"], ["posts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_posts_id"), "posts", ["id"])
    op.create_index(op.f("ix_posts_post_type"), "posts", ["post_type"])

    op.create_table(
        "post_meta",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("meta_key", sa.String(255), nullable=False),
        sa.Column("meta_value", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", "meta_key", name="unique_post_meta_key"),
    )
    op.create_index(op.f("ix_post_meta_id"), "post_meta", ["id"])
    op.create_index(op.f("ix_post_meta_post_id"), "post_meta", ["post_id"])

    op.create_table(
        "term_meta",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("term_id", sa.Integer(), nullable=False),
        sa.Column("meta_key", sa.String(255), nullable=False),
        sa.Column("meta_value", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("term_id", "meta_key", name="unique_term_meta_key"),
    )
    op.create_index(op.f("ix_term_meta_id"), "term_meta", ["id"])
    op.create_index(op.f("ix_term_meta_term_id"), "term_meta", ["term_id"])


def downgrade() -> None:
    op.drop_index(op.f("ix_term_meta_term_id"), table_name="term_meta")
    op.drop_index(op.f("ix_term_meta_id"), table_name="term_meta")
    op.drop_table("term_meta")
    op.drop_index(op.f("ix_post_meta_post_id"), table_name="post_meta")
    op.drop_index(op.f("ix_post_meta_id"), table_name="post_meta")
    op.drop_table("post_meta")
    op.drop_index(op.f("ix_posts_post_type"), table_name="posts")
    op.drop_index(op.f("ix_posts_id"), table_name="posts")
    op.drop_table("posts")
