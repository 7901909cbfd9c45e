"""storage entries

Revision ID: 3b1f0c9a7e21
Revises: 
Create Date: 2026-10-19 10:12:40.118402

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b1f0c9a7e21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'storage_entries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('client_id', sa.String(length=64), nullable=False),
        sa.Column('key', sa.String(length=100), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('client_id', 'key', name='uq_client_key'),
    )
    op.create_index(op.f('ix_storage_entries_id'), 'storage_entries', ['id'], unique=False)
    op.create_index(op.f('ix_storage_entries_client_id'), 'storage_entries', ['client_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_storage_entries_client_id'), table_name='storage_entries')
    op.drop_index(op.f('ix_storage_entries_id'), table_name='storage_entries')
    op.drop_table('storage_entries')
