"""create_events_and_checkins

Revision ID: a3f9c2d1e7b4
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'a3f9c2d1e7b4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'events',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('password_protected', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('admin_password', sa.String(length=255), nullable=True),
        sa.Column('archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_events_name', 'events', ['name'])

    # One check-in per employee per event; deleting an event removes its check-ins
    op.create_table(
        'checkins',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('event_id', sa.String(length=36),
                  sa.ForeignKey('events.id', ondelete='CASCADE'), nullable=False),
        sa.Column('employee_id', sa.String(length=6), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('event_id', 'employee_id', name='uq_checkin_event_employee'),
    )
    op.create_index('idx_checkins_event', 'checkins', ['event_id'])


def downgrade():
    op.drop_index('idx_checkins_event', table_name='checkins')
    op.drop_table('checkins')
    op.drop_index('ix_events_name', table_name='events')
    op.drop_table('events')
