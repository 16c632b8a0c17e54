"""Create user_profiles and agents tables

Revision ID: 001_create_profiles_and_agents
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_create_profiles_and_agents'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    """
    Creates the portal tables.

    user_profiles is keyed by the Supabase Auth user UUID. agents holds
    applications; only rows with status 'approved' are shown on the map.
    """
    op.create_table(
        'user_profiles',
        sa.Column('user_id', sa.String(length=36), primary_key=True),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('display_name', sa.String(length=128), nullable=True),
        sa.Column('role', sa.String(length=10), nullable=False, server_default='agent'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_user_profiles_email', 'user_profiles', ['email'])

    op.create_table(
        'agents',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('application_id', sa.String(length=8), nullable=False, unique=True),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('phone', sa.String(length=32), nullable=False),
        sa.Column('address', sa.String(length=256), nullable=False),
        sa.Column('business_name', sa.String(length=128), nullable=False),
        sa.Column('business_type', sa.String(length=64), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('additional_info', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=10), nullable=False, server_default='pending'),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('user_profiles.user_id'), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_agents_email', 'agents', ['email'])
    op.create_index('ix_agents_status', 'agents', ['status'])
    op.create_index('ix_agents_user_id', 'agents', ['user_id'])


def downgrade():
    op.drop_table('agents')
    op.drop_table('user_profiles')
