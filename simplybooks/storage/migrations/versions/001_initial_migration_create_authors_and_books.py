"""Initial migration - create authors and books tables

Revision ID: 001
Revises:
Create Date: 2025-04-07 22:31:02.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create authors and books tables."""
    op.create_table(
        'authors',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('favorite', sa.Boolean(), nullable=False),
        sa.Column('image', sa.String(), nullable=True),
        sa.Column('uid', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_authors_uid'), 'authors', ['uid'], unique=False)

    op.create_table(
        'books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('image', sa.String(), nullable=True),
        sa.Column('price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('sale', sa.Boolean(), nullable=False),
        sa.Column('uid', sa.String(), nullable=True),
        sa.Column('author_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ['author_id'], ['authors.id'], ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_books_uid'), 'books', ['uid'], unique=False)


def downgrade() -> None:
    """Drop books and authors tables."""
    op.drop_index(op.f('ix_books_uid'), table_name='books')
    op.drop_table('books')
    op.drop_index(op.f('ix_authors_uid'), table_name='authors')
    op.drop_table('authors')
