"""Create recruiter request and candidate profile tables

Revision ID: 3f2a9c1d7e40
Revises: 
Create Date: 2026-10-19 10:12:41.508213

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f2a9c1d7e40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('recruiter_request',
        sa.Column('id', sa.String(32), nullable=False),
        sa.Column('token', sa.String(64), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('company', sa.String(200), nullable=False),
        sa.Column('job_title', sa.String(200), nullable=False),
        sa.Column('company_size', sa.String(50), nullable=True),
        sa.Column('candidate_name', sa.String(200), nullable=False),
        sa.Column('candidate_email', sa.String(255), nullable=False),
        sa.Column('position_title', sa.String(200), nullable=False),
        sa.Column('additional_notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_recruiter_request_token'), 'recruiter_request', ['token'], unique=True)

    op.create_table('candidate_profile',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('request_id', sa.String(32), nullable=False),
        sa.Column('full_name', sa.String(200), nullable=True),
        sa.Column('github_username', sa.String(100), nullable=True),
        sa.Column('linkedin_url', sa.String(500), nullable=True),
        sa.Column('stackoverflow_url', sa.String(500), nullable=True),
        sa.Column('portfolio_url', sa.String(500), nullable=True),
        sa.Column('additional_profiles', sa.JSON(), nullable=False),
        sa.Column('additional_info', sa.Text(), nullable=True),
        sa.Column('submitted_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['request_id'], ['recruiter_request.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('request_id')
    )


def downgrade():
    op.drop_table('candidate_profile')
    op.drop_index(op.f('ix_recruiter_request_token'), table_name='recruiter_request')
    op.drop_table('recruiter_request')
