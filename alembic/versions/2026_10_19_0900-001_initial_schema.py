"""Initial schema: users plus sleep, workout, food, wellness and recommendation tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_NOW = sa.text('(CURRENT_TIMESTAMP)')


def _str(length=None):
    return sqlmodel.sql.sqltypes.AutoString(length=length)


def upgrade() -> None:
    """Create all tables."""
    # Users (superusers are professionals)
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', _str(255), nullable=False),
        sa.Column('hashed_password', _str(), nullable=False),
        sa.Column('full_name', _str(255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('is_superuser', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    # Sleep
    op.create_table('sleep_entries', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('bed_time', sa.Time(), nullable=False),
        sa.Column('wake_time', sa.Time(), nullable=False),
        sa.Column('duration_min', sa.Integer(), nullable=False),
        sa.Column('quality', sa.Integer(), nullable=False),
        sa.Column('deep_sleep_min', sa.Integer(), nullable=True),
        sa.Column('rem_sleep_min', sa.Integer(), nullable=True),
        sa.Column('light_sleep_min', sa.Integer(), nullable=True),
        sa.Column('awake_min', sa.Integer(), nullable=True),
        sa.Column('notes', _str(1000), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'date', name='uq_sleep_user_date'))
    op.create_index(op.f('ix_sleep_entries_user_id'), 'sleep_entries', ['user_id'])
    op.create_index(op.f('ix_sleep_entries_date'), 'sleep_entries', ['date'])

    op.create_table('sleep_assessments', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('average_sleep_hours', sa.Float(), nullable=False),
        sa.Column('bed_time', sa.Time(), nullable=False),
        sa.Column('wake_time', sa.Time(), nullable=False),
        sa.Column('sleep_latency_min', sa.Integer(), nullable=False),
        sa.Column('sleep_quality', _str(20), nullable=False),
        sa.Column('wake_up_frequency', _str(20), nullable=False),
        sa.Column('morning_feel', _str(20), nullable=False),
        sa.Column('room_temperature', _str(20), nullable=False),
        sa.Column('noise_level', _str(20), nullable=False),
        sa.Column('light_level', _str(20), nullable=False),
        sa.Column('disruptors', sa.JSON(), nullable=False),
        sa.Column('disorders', sa.JSON(), nullable=False),
        sa.Column('sleep_goal', _str(30), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_sleep_assessments_user_id'), 'sleep_assessments', ['user_id'])
    op.create_index(op.f('ix_sleep_assessments_created_at'), 'sleep_assessments', ['created_at'])

    op.create_table('sleep_goals', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('target_duration_min', sa.Integer(), nullable=False),
        sa.Column('target_bed_time', sa.Time(), nullable=False),
        sa.Column('target_wake_time', sa.Time(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_sleep_goals_user_id'), 'sleep_goals', ['user_id'], unique=True)

    # Workouts
    op.create_table('workout_routines', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', _str(120), nullable=False),
        sa.Column('description', _str(2000), nullable=True),
        sa.Column('level', _str(20), nullable=False),
        sa.Column('goal', _str(20), nullable=False),
        sa.Column('frequency', sa.Integer(), nullable=False),
        sa.Column('days', sa.JSON(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_template', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_routines_user_id'), 'workout_routines', ['user_id'])
    op.create_index(op.f('ix_workout_routines_is_active'), 'workout_routines', ['is_active'])
    op.create_index(op.f('ix_workout_routines_is_template'), 'workout_routines', ['is_template'])

    op.create_table('workout_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('routine_id', sa.Integer(), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('duration_min', sa.Integer(), nullable=False),
        sa.Column('exercises', sa.JSON(), nullable=False),
        sa.Column('notes', _str(1000), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['routine_id'], ['workout_routines.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workout_sessions_user_id'), 'workout_sessions', ['user_id'])
    op.create_index(op.f('ix_workout_sessions_date'), 'workout_sessions', ['date'])

    op.create_table('volume_progressions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('muscle_group', _str(40), nullable=False),
        sa.Column('week_start', sa.Date(), nullable=False),
        sa.Column('sets_performed', sa.Integer(), nullable=False),
        sa.Column('target_sets', sa.Integer(), nullable=False),
        sa.Column('adaptation_response', _str(10), nullable=False),
        sa.Column('fatigue_level', sa.Integer(), nullable=False),
        sa.Column('notes', _str(1000), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_volume_progressions_user_id'), 'volume_progressions', ['user_id'])
    op.create_index(op.f('ix_volume_progressions_muscle_group'), 'volume_progressions', ['muscle_group'])
    op.create_index(op.f('ix_volume_progressions_week_start'), 'volume_progressions', ['week_start'])

    op.create_table('training_assessments', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('assessment_data', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_training_assessments_user_id'), 'training_assessments', ['user_id'])
    op.create_index(op.f('ix_training_assessments_created_at'), 'training_assessments', ['created_at'])

    # Food database
    op.create_table('food_database', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('external_id', _str(50), nullable=True),
        sa.Column('name', _str(200), nullable=False),
        sa.Column('brand', _str(120), nullable=True),
        sa.Column('category', _str(60), nullable=False),
        sa.Column('subcategory', _str(60), nullable=True),
        sa.Column('region', _str(60), nullable=True),
        sa.Column('calories', sa.Float(), nullable=False),
        sa.Column('protein', sa.Float(), nullable=False),
        sa.Column('carbs', sa.Float(), nullable=False),
        sa.Column('fat', sa.Float(), nullable=False),
        sa.Column('fiber', sa.Float(), nullable=True),
        sa.Column('sugar', sa.Float(), nullable=True),
        sa.Column('serving_size', sa.Float(), nullable=False),
        sa.Column('serving_unit', _str(20), nullable=False),
        sa.Column('image_url', _str(500), nullable=True),
        sa.Column('supermarkets', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_food_database_external_id'), 'food_database', ['external_id'], unique=True)
    op.create_index(op.f('ix_food_database_name'), 'food_database', ['name'])
    op.create_index(op.f('ix_food_database_category'), 'food_database', ['category'])

    # Wellness
    op.create_table('emotional_journal', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('title', _str(200), nullable=False),
        sa.Column('content', _str(), nullable=False),
        sa.Column('emotion', _str(20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_emotional_journal_user_id'), 'emotional_journal', ['user_id'])
    op.create_index(op.f('ix_emotional_journal_date'), 'emotional_journal', ['date'])

    op.create_table('mood_entries', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('time', sa.Time(), nullable=True),
        sa.Column('mood', sa.Integer(), nullable=False),
        sa.Column('energy', sa.Integer(), nullable=False),
        sa.Column('stress', sa.Integer(), nullable=False),
        sa.Column('notes', _str(1000), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_mood_entries_user_id'), 'mood_entries', ['user_id'])
    op.create_index(op.f('ix_mood_entries_date'), 'mood_entries', ['date'])

    op.create_table('wellness_activity_logs', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('activity_name', _str(120), nullable=False),
        sa.Column('category', _str(20), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('duration_min', sa.Integer(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=True),
        sa.Column('notes', _str(1000), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_wellness_activity_logs_user_id'), 'wellness_activity_logs', ['user_id'])
    op.create_index(op.f('ix_wellness_activity_logs_date'), 'wellness_activity_logs', ['date'])

    # Recommendations
    op.create_table('personalized_recommendations', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('type', _str(20), nullable=False),
        sa.Column('title', _str(200), nullable=False),
        sa.Column('description', _str(), nullable=False),
        sa.Column('priority', _str(10), nullable=False),
        sa.Column('base_reason', _str(500), nullable=False),
        sa.Column('data_points', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.Column('expires_at', sa.DateTime(), nullable=True),
        sa.Column('implemented', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('result', _str(1000), nullable=True),
        sa.Column('implemented_by', sa.Integer(), nullable=True),
        sa.Column('implemented_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['implemented_by'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_personalized_recommendations_user_id'), 'personalized_recommendations', ['user_id'])
    op.create_index(op.f('ix_personalized_recommendations_type'), 'personalized_recommendations', ['type'])
    op.create_index(op.f('ix_personalized_recommendations_created_at'), 'personalized_recommendations',
                    ['created_at'])


def downgrade() -> None:
    """Drop all tables."""
    for table in ('personalized_recommendations', 'wellness_activity_logs', 'mood_entries', 'emotional_journal',
                  'food_database', 'training_assessments', 'volume_progressions', 'workout_sessions',
                  'workout_routines', 'sleep_goals', 'sleep_assessments', 'sleep_entries', 'users'):
        op.drop_table(table)
