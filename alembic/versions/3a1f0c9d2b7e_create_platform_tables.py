"""Create platform and announcement tables

Revision ID: 3a1f0c9d2b7e
Revises:
Create Date: 2025-07-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a1f0c9d2b7e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the tables read by the dashboard plus the announces table."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_created_at', 'users', ['created_at'])

    op.create_table(
        'devices',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('device_id', sa.String(), nullable=False),
        sa.Column('is_vip', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('last_active_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_devices_device_id', 'devices', ['device_id'], unique=True)
    op.create_index('ix_devices_last_active_at', 'devices', ['last_active_at'])
    op.create_index('ix_devices_created_at', 'devices', ['created_at'])

    op.create_table(
        'contents',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('isvip', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('views_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_contents_created_at', 'contents', ['created_at'])

    op.create_table(
        'content_views',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('content_id', sa.Integer(), sa.ForeignKey('contents.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_content_views_content_id', 'content_views', ['content_id'])
    op.create_index('ix_content_views_created_at', 'content_views', ['created_at'])

    op.create_table(
        'subscriptions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_subscriptions_created_at', 'subscriptions', ['created_at'])

    op.create_table(
        'announces',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('link', sa.String(length=255), nullable=True),
        sa.Column('imgUrl', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
    )
    op.create_index('ix_announces_category', 'announces', ['category'])


def downgrade() -> None:
    op.drop_table('announces')
    op.drop_table('subscriptions')
    op.drop_table('content_views')
    op.drop_table('contents')
    op.drop_table('devices')
    op.drop_table('users')
