"""Create bookstore tables

Revision ID: 001
Revises: None
Create Date: 2025-05-20 00:00:00.000000+00:00

What:  Creates users, book_cards, purchased_books and book_reviews.
Why:   Matches the models in bookstore/models; the application also runs
       create_all on startup, so this revision is a no-op for a database the
       server has already initialized (stamp it instead of upgrading).

Rollback: downgrade() drops all four tables (destructive).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "book_cards",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        # Free-form display price, e.g. "$12.99"
        sa.Column("price", sa.String(50), nullable=False),
        sa.Column("image_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_book_cards"),
    )

    # No unique constraint on (user_id, book_title): duplicates are rejected
    # by the application before insert
    op.create_table(
        "purchased_books",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("book_title", sa.String(255), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id", name="pk_purchased_books"),
    )
    op.create_index("ix_purchased_books_user_id", "purchased_books", ["user_id"])

    op.create_table(
        "book_reviews",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("book_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["book_id"], ["book_cards.id"]),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id", name="pk_book_reviews"),
    )
    op.create_index("ix_book_reviews_book_id", "book_reviews", ["book_id"])


def downgrade() -> None:
    op.drop_index("ix_book_reviews_book_id", table_name="book_reviews")
    op.drop_table("book_reviews")
    op.drop_index("ix_purchased_books_user_id", table_name="purchased_books")
    op.drop_table("purchased_books")
    op.drop_table("book_cards")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
