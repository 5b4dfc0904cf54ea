"""Index progress history by user and date

Revision ID: 002
Revises: 001
Create Date: 2026-10-12

The progress endpoint reads all records of one user newest-first.
This replaces the single-column user_id index with a composite
(user_id, created_at) index that serves both the filter and the sort.

Safe for deployed databases:
- the new index is created before the old one is dropped
- downgrade restores the single-column index
"""
from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_index(
        'ix_progress_records_user_created',
        'progress_records',
        ['user_id', 'created_at'],
    )
    op.drop_index('ix_progress_records_user_id', table_name='progress_records')


def downgrade() -> None:
    op.create_index('ix_progress_records_user_id', 'progress_records', ['user_id'])
    op.drop_index('ix_progress_records_user_created', table_name='progress_records')
