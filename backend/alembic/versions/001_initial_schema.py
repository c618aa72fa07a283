"""Initial schema — main exhibitions, archive, universities, submissions, likes.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

arts / art_likes mirror tables owned by the artwork subsystem; they are
created here only when absent so a shared database keeps its own copy.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _table_exists(name: str) -> bool:
    return sa.inspect(op.get_bind()).has_table(name)


def upgrade() -> None:
    if not _table_exists("arts"):
        op.create_table(
            "arts",
            sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
            sa.Column("art_title", sa.String(200), nullable=False),
            sa.Column("art_category", sa.String(50), nullable=True),
            sa.Column("art_description", sa.Text, nullable=True),
            sa.Column("art_img_name", sa.String(255), nullable=True),
            sa.Column("art_img_path", sa.String(500), nullable=True),
            sa.Column("user_id", sa.Integer, nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        )
    if not _table_exists("art_likes"):
        op.create_table(
            "art_likes",
            sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
            sa.Column("art_id", sa.Integer, sa.ForeignKey("arts.id", ondelete="CASCADE"), nullable=False, index=True),
            sa.Column("user_id", sa.Integer, nullable=False),
            sa.UniqueConstraint("art_id", "user_id", name="uq_art_likes_art_user"),
        )

    op.create_table(
        "gradation_exhibitions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("art", sa.String(200), nullable=True),
        sa.Column("category", sa.String(50), nullable=True),
        sa.Column("time", sa.String(100), nullable=True),
        sa.Column("fee", sa.String(50), nullable=True),
        sa.Column("tel", sa.String(30), nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        sa.Column("date", sa.String(30), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "gradation_exhibition_images",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("img_name", sa.String(255), nullable=False),
        sa.Column("img_path", sa.String(500), nullable=False),
        sa.Column(
            "gradation_exhibition_id", sa.Integer,
            sa.ForeignKey("gradation_exhibitions.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
    )

    op.create_table(
        "past_exhibitions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "gradation_exhibition_id", sa.Integer,
            sa.ForeignKey("gradation_exhibitions.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
        sa.Column("art_id", sa.Integer, sa.ForeignKey("arts.id", ondelete="CASCADE"), nullable=False),
        sa.UniqueConstraint(
            "gradation_exhibition_id", "art_id",
            name="uq_past_exhibitions_exhibition_art",
        ),
    )

    op.create_table(
        "universities",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("university_name", sa.String(100), nullable=False, unique=True),
        sa.Column("logo_img_name", sa.String(255), nullable=False),
        sa.Column("logo_img_path", sa.String(500), nullable=False),
    )

    op.create_table(
        "majors",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("major_name", sa.String(100), nullable=False),
        sa.Column(
            "university_id", sa.Integer,
            sa.ForeignKey("universities.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
    )

    op.create_table(
        "university_exhibitions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("explanation", sa.Text, nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("request_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("user_id", sa.Integer, nullable=False, index=True),
        sa.Column("major_id", sa.Integer, sa.ForeignKey("majors.id", ondelete="CASCADE"), nullable=False),
    )

    op.create_table(
        "university_exhibition_images",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("img_name", sa.String(255), nullable=False),
        sa.Column("img_path", sa.String(500), nullable=False),
        sa.Column(
            "university_exhibition_id", sa.Integer,
            sa.ForeignKey("university_exhibitions.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
    )

    op.create_table(
        "university_likes",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "university_exhibition_id", sa.Integer,
            sa.ForeignKey("university_exhibitions.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("user_id", sa.Integer, nullable=False, index=True),
        sa.UniqueConstraint(
            "university_exhibition_id", "user_id",
            name="uq_university_likes_exhibition_user",
        ),
    )


def downgrade() -> None:
    op.drop_table("university_likes")
    op.drop_table("university_exhibition_images")
    op.drop_table("university_exhibitions")
    op.drop_table("majors")
    op.drop_table("universities")
    op.drop_table("past_exhibitions")
    op.drop_table("gradation_exhibition_images")
    op.drop_table("gradation_exhibitions")
