"""Create users, events, event_attendees and comments tables

Revision ID: a001_create_core_tables
Revises:
Create Date: 2026-10-19

This migration creates the whole entity graph:
- users: credentials, unique lowercase email
- events: owned by their creator
- event_attendees: attendee set, one row per (event, user)

Every table has an integer `seq` primary key that records insertion
order. Public ids are the opaque `id` strings.
- comments: immutable, attached to an event and an author
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'a001_create_core_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('seq', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('id', sa.String(), nullable=False, unique=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'events',
        sa.Column('seq', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('id', sa.String(), nullable=False, unique=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_by_id', sa.String(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_events_title', 'events', ['title'])
    op.create_index('ix_events_date', 'events', ['date'])
    op.create_index('ix_events_created_by_id', 'events', ['created_by_id'])

    # The (event_id, user_id) unique constraint keeps the attendee set duplicate-free
    op.create_table(
        'event_attendees',
        sa.Column('seq', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('event_id', sa.String(), sa.ForeignKey('events.id'), nullable=False),
        sa.Column('user_id', sa.String(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('joined_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('event_id', 'user_id', name='uq_event_attendees_event_user'),
    )
    op.create_index('ix_event_attendees_user_id', 'event_attendees', ['user_id'])

    op.create_table(
        'comments',
        sa.Column('seq', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('id', sa.String(), nullable=False, unique=True),
        sa.Column('text', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('author_id', sa.String(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('event_id', sa.String(), sa.ForeignKey('events.id'), nullable=False),
    )
    op.create_index('ix_comments_author_id', 'comments', ['author_id'])
    op.create_index('ix_comments_event_id', 'comments', ['event_id'])


def downgrade() -> None:
    op.drop_table('comments')
    op.drop_table('event_attendees')
    op.drop_table('events')
    op.drop_table('users')
