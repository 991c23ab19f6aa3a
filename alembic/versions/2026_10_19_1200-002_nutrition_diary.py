"""Nutrition diary: food entries and daily macro goals

Revision ID: 002
Revises: 001
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_NOW = sa.text('(CURRENT_TIMESTAMP)')


def _str(length=None):
    return sqlmodel.sql.sqltypes.AutoString(length=length)


def upgrade() -> None:
    op.create_table('nutrition', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('meal_type', _str(20), nullable=False),
        sa.Column('food_name', _str(200), nullable=False),
        sa.Column('food_id', sa.Integer(), nullable=True),
        sa.Column('quantity', sa.Float(), nullable=True),
        sa.Column('unit', _str(20), nullable=True),
        sa.Column('calories', sa.Float(), nullable=False, server_default='0'),
        sa.Column('protein', sa.Float(), nullable=False, server_default='0'),
        sa.Column('carbs', sa.Float(), nullable=False, server_default='0'),
        sa.Column('fat', sa.Float(), nullable=False, server_default='0'),
        sa.Column('notes', _str(1000), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['food_id'], ['food_database.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_nutrition_user_id'), 'nutrition', ['user_id'])
    op.create_index(op.f('ix_nutrition_date'), 'nutrition', ['date'])

    op.create_table('nutrition_goals', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('calories', sa.Float(), nullable=False),
        sa.Column('protein', sa.Float(), nullable=False),
        sa.Column('carbs', sa.Float(), nullable=False),
        sa.Column('fat', sa.Float(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=_NOW),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_nutrition_goals_user_id'), 'nutrition_goals', ['user_id'])
    op.create_index(op.f('ix_nutrition_goals_is_active'), 'nutrition_goals', ['is_active'])


def downgrade() -> None:
    op.drop_table('nutrition_goals')
    op.drop_table('nutrition')
