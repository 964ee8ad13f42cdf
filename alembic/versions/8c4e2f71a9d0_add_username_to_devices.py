"""Add username to devices

Revision ID: 8c4e2f71a9d0
Revises: 3a1f0c9d2b7e
Create Date: 2025-07-20 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8c4e2f71a9d0'
down_revision: Union[str, Sequence[str], None] = '3a1f0c9d2b7e'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Add a unique, optional username to each device."""
    # batch mode so the unique constraint also works on SQLite.
    with op.batch_alter_table('devices') as batch_op:
        batch_op.add_column(sa.Column('username', sa.String(), nullable=True))
        batch_op.create_unique_constraint('uq_devices_username', ['username'])


def downgrade() -> None:
    """Remove the device username."""
    with op.batch_alter_table('devices') as batch_op:
        batch_op.drop_constraint('uq_devices_username', type_='unique')
        batch_op.drop_column('username')
