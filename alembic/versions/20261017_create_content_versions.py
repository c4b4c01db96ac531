"""Create content version history tables

Creates versionControlSettings and contentVersions, plus minimal posts
and pages tables for the live content the engine restores onto.

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create version history and live content tables."""
    # ========================================================================
    # 1. Live content
    # ========================================================================
    op.create_table(
        'posts',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('last_synced_at', sa.BigInteger(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_posts_slug'), 'posts', ['slug'], unique=True)

    op.create_table(
        'pages',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('last_synced_at', sa.BigInteger(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_pages_slug'), 'pages', ['slug'], unique=True)

    # ========================================================================
    # 2. Version control switch
    # ========================================================================
    op.create_table(
        'versionControlSettings',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('key', sa.String(length=64), nullable=False),
        sa.Column('value', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_versionControlSettings_key'), 'versionControlSettings', ['key'], unique=True
    )

    # ========================================================================
    # 3. Version snapshots
    # ========================================================================
    op.create_table(
        'contentVersions',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('content_type', sa.String(length=16), nullable=False),
        sa.Column('content_id', sa.String(length=64), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
        sa.Column('source', sa.String(length=16), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    # History lookups: by content key, newest first
    op.create_index(
        'ix_contentVersions_content',
        'contentVersions',
        ['content_type', 'content_id', 'created_at'],
    )
    # Retention sweep: by created_at, oldest first
    op.create_index('ix_contentVersions_created_at', 'contentVersions', ['created_at'])


def downgrade() -> None:
    """Drop version history and live content tables."""
    op.drop_index('ix_contentVersions_created_at', table_name='contentVersions')
    op.drop_index('ix_contentVersions_content', table_name='contentVersions')
    op.drop_table('contentVersions')

    op.drop_index(op.f('ix_versionControlSettings_key'), table_name='versionControlSettings')
    op.drop_table('versionControlSettings')

    op.drop_index(op.f('ix_pages_slug'), table_name='pages')
    op.drop_table('pages')

    op.drop_index(op.f('ix_posts_slug'), table_name='posts')
    op.drop_table('posts')
