"""Seed fixture authors and books

Revision ID: 002
Revises: 001
Create Date: 2025-04-07 22:35:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from simplybooks.storage.seed import SEED_AUTHORS, SEED_BOOKS, SYNC_SEQUENCE_SQL


# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


authors_table = sa.table(
    'authors',
    sa.column('id', sa.Integer),
    sa.column('first_name', sa.String),
    sa.column('last_name', sa.String),
    sa.column('email', sa.String),
    sa.column('favorite', sa.Boolean),
    sa.column('image', sa.String),
    sa.column('uid', sa.String),
)

books_table = sa.table(
    'books',
    sa.column('id', sa.Integer),
    sa.column('title', sa.String),
    sa.column('description', sa.String),
    sa.column('image', sa.String),
    sa.column('price', sa.Numeric),
    sa.column('sale', sa.Boolean),
    sa.column('uid', sa.String),
    sa.column('author_id', sa.Integer),
)


def upgrade() -> None:
    """Insert fixture rows and move the id sequences past them."""
    op.bulk_insert(authors_table, SEED_AUTHORS)
    op.bulk_insert(books_table, SEED_BOOKS)

    if op.get_bind().dialect.name == 'postgresql':
        for table in ('authors', 'books'):
            op.execute(SYNC_SEQUENCE_SQL.format(table=table))


def downgrade() -> None:
    """Remove fixture rows."""
    op.execute(
        books_table.delete().where(
            books_table.c.id.in_([b['id'] for b in SEED_BOOKS])
        )
    )
    op.execute(
        authors_table.delete().where(
            authors_table.c.id.in_([a['id'] for a in SEED_AUTHORS])
        )
    )
