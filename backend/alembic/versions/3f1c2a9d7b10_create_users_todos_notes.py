"""Create users, todos and notes tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 09:12:31.402118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('pid', sa.String(length=64), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('display_name', sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(username) <= 50', name='ck_users_username_len'),
        sa.UniqueConstraint('pid'),
        sa.UniqueConstraint('username'),
    )
    op.create_index('idx_users_username', 'users', ['username'])

    op.create_table(
        'todos',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('pid', sa.String(length=64), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('priority', sa.String(length=10), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False),
        sa.Column('tags', postgresql.ARRAY(sa.String(length=100)), nullable=True),
        sa.Column('mentions', postgresql.ARRAY(sa.String(length=100)), nullable=True),
        sa.Column('user_pid', sa.String(length=64), sa.ForeignKey('users.pid'), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("priority IN ('high', 'medium', 'low')", name='ck_todos_priority'),
        sa.UniqueConstraint('pid'),
    )
    op.create_index('idx_todos_user_pid', 'todos', ['user_pid'])
    op.create_index('idx_todos_created_at', 'todos', ['created_at'])

    op.create_table(
        'notes',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('pid', sa.String(length=64), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column(
            'todo_pid',
            sa.String(length=64),
            sa.ForeignKey('todos.pid', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('user_pid', sa.String(length=64), sa.ForeignKey('users.pid'), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('pid'),
    )
    op.create_index('idx_notes_todo_pid', 'notes', ['todo_pid'])
    op.create_index('idx_notes_todo_created', 'notes', ['todo_pid', 'created_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_notes_todo_created', table_name='notes')
    op.drop_index('idx_notes_todo_pid', table_name='notes')
    op.drop_table('notes')
    op.drop_index('idx_todos_created_at', table_name='todos')
    op.drop_index('idx_todos_user_pid', table_name='todos')
    op.drop_table('todos')
    op.drop_index('idx_users_username', table_name='users')
    op.drop_table('users')
