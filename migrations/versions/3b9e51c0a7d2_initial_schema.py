"""initial schema: clients, projects, documents, resumes, external_data

Revision ID: 3b9e51c0a7d2
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3b9e51c0a7d2'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PROJECT_STATUS_VALUES = ('In Progress', 'Delivered', 'Paid')
DOCUMENT_TYPE_VALUES = ('invoice', 'contract')
RESUME_TYPE_VALUES = ('resume', 'coverLetter')


def upgrade() -> None:
    op.create_table(
        'clients',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('company', sa.String(), nullable=True),
        sa.Column('language', sa.String(), nullable=True),
        sqlite_autoincrement=True,
    )

    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('client_id', sa.Integer(), sa.ForeignKey('clients.id'), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('deadline', sa.DateTime(), nullable=True),
        sa.Column('amount', sa.Float(), nullable=True),
        sa.Column('volume', sa.Integer(), nullable=True),
        sa.Column('source_lang', sa.String(), nullable=True),
        sa.Column('target_lang', sa.String(), nullable=True),
        sa.Column('status', sa.Enum(*PROJECT_STATUS_VALUES, name='project_status'), nullable=False),
        sa.Column('invoice_sent', sa.Boolean(), nullable=False),
        sa.Column('is_paid', sa.Boolean(), nullable=False),
        sa.Column('is_archived', sa.Boolean(), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_projects_client_id', 'projects', ['client_id'])

    op.create_table(
        'documents',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('type', sa.Enum(*DOCUMENT_TYPE_VALUES, name='document_type'), nullable=False),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id', ondelete='SET NULL'), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_documents_project_id', 'documents', ['project_id'])

    op.create_table(
        'resumes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('type', sa.Enum(*RESUME_TYPE_VALUES, name='resume_type'), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id', ondelete='SET NULL'), nullable=True),
        sa.Column('target_position', sa.String(), nullable=True),
        sa.Column('target_company', sa.String(), nullable=True),
        sqlite_autoincrement=True,
    )

    op.create_table(
        'external_data',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('source', sa.String(), nullable=False),
        sa.Column('data_type', sa.String(), nullable=False),
        sa.Column('content', sa.JSON(), nullable=False),
        sa.Column('processed', sa.Boolean(), nullable=False),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table('external_data')
    op.drop_table('resumes')
    op.drop_index('ix_documents_project_id', table_name='documents')
    op.drop_table('documents')
    op.drop_index('ix_projects_client_id', table_name='projects')
    op.drop_table('projects')
    op.drop_table('clients')
    sa.Enum(name='resume_type').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='document_type').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='project_status').drop(op.get_bind(), checkfirst=True)
