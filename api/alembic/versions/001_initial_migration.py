"""Create card state, review log, settings and lesson progress tables

Revision ID: 001_initial_migration
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_migration'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the scheduling and history tables."""
    op.create_table(
        'user_card_state',
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('card_id', sa.String(length=255), nullable=False),
        sa.Column('due', sa.DateTime(timezone=True), nullable=False),
        sa.Column('stability', sa.Float(), nullable=False),
        sa.Column('difficulty', sa.Float(), nullable=False),
        sa.Column('elapsed_days', sa.Float(), nullable=False),
        sa.Column('scheduled_days', sa.Float(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('lapses', sa.Integer(), nullable=False),
        sa.Column('state', sa.Integer(), nullable=False),
        sa.Column('last_review', sa.DateTime(timezone=True), nullable=True),
        sa.Column('scheduler_blob', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('user_id', 'card_id')
    )
    op.create_index('ix_user_card_state_user_due', 'user_card_state', ['user_id', 'due'])
    op.create_index('ix_user_card_state_user_state', 'user_card_state', ['user_id', 'state'])

    op.create_table(
        'review_log',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('card_id', sa.String(length=255), nullable=False),
        sa.Column('lesson_id', sa.String(length=255), nullable=True),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.Column('scheduled_days', sa.Float(), nullable=False),
        sa.Column('elapsed_days', sa.Float(), nullable=False),
        sa.Column('state', sa.Integer(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('context', sa.String(length=50), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_review_log_user_timestamp', 'review_log', ['user_id', 'timestamp'])
    op.create_index('ix_review_log_user_card', 'review_log', ['user_id', 'card_id'])
    op.create_index('ix_review_log_user_lesson', 'review_log', ['user_id', 'lesson_id'])

    op.create_table(
        'user_settings',
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('theme', sa.String(length=10), nullable=False, server_default='system'),
        sa.Column('daily_review_goal', sa.Integer(), nullable=False, server_default='50'),
        sa.Column('new_cards_per_day', sa.Integer(), nullable=False, server_default='20'),
        sa.Column('font_size', sa.String(length=10), nullable=False, server_default='medium'),
        sa.Column('reduced_motion', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('desired_retention', sa.Float(), nullable=False, server_default='0.9'),
        sa.PrimaryKeyConstraint('user_id')
    )

    op.create_table(
        'lesson_progress',
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('lesson_id', sa.String(length=255), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='available'),
        sa.Column('sections_read', sa.JSON(), nullable=False),
        sa.Column('quiz_attempts', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('best_quiz_score', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_accessed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('total_time_spent', sa.Integer(), nullable=False, server_default='0'),
        sa.PrimaryKeyConstraint('user_id', 'lesson_id')
    )


def downgrade() -> None:
    """Drop the scheduling and history tables."""
    op.drop_table('lesson_progress')
    op.drop_table('user_settings')
    op.drop_index('ix_review_log_user_lesson', table_name='review_log')
    op.drop_index('ix_review_log_user_card', table_name='review_log')
    op.drop_index('ix_review_log_user_timestamp', table_name='review_log')
    op.drop_table('review_log')
    op.drop_index('ix_user_card_state_user_state', table_name='user_card_state')
    op.drop_index('ix_user_card_state_user_due', table_name='user_card_state')
    op.drop_table('user_card_state')
