"""create vcs, project, repository, app_settings tables

Revision ID: c3d4e5f6a7b8
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'c3d4e5f6a7b8'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # vcs
    op.create_table('vcs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('creator_id', sa.Integer(), nullable=False),
        sa.Column('created_ts', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updater_id', sa.Integer(), nullable=False),
        sa.Column('updated_ts', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('type', sa.Enum('GITLAB_SELF_HOST', name='vcstype'), nullable=False),
        sa.Column('instance_url', sa.String(length=500), nullable=False),
        sa.Column('api_url', sa.String(length=500), nullable=False),
        sa.Column('application_id', sa.String(length=200), nullable=False),
        sa.Column('secret', sa.String(length=500), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    # project
    op.create_table('project',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('creator_id', sa.Integer(), nullable=False),
        sa.Column('created_ts', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updater_id', sa.Integer(), nullable=False),
        sa.Column('updated_ts', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('key', sa.String(length=50), nullable=False),
        sa.Column('workflow_type', sa.Enum('UI', 'VCS', name='workflowtype'), nullable=False),
        sa.Column('tenant_mode', sa.Enum('DISABLED', 'TENANT', name='tenantmode'), nullable=False),
        sa.UniqueConstraint('key'),
        sa.PrimaryKeyConstraint('id')
    )

    # repository (프로젝트당 1개)
    op.create_table('repository',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('creator_id', sa.Integer(), nullable=False),
        sa.Column('created_ts', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updater_id', sa.Integer(), nullable=False),
        sa.Column('updated_ts', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('vcs_id', sa.Integer(), nullable=False),
        sa.Column('project_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('full_path', sa.String(length=500), nullable=False),
        sa.Column('web_url', sa.String(length=500), nullable=False),
        sa.Column('branch_filter', sa.String(length=200), nullable=False),
        sa.Column('base_directory', sa.String(length=500), nullable=False),
        sa.Column('file_path_template', sa.String(length=500), nullable=False),
        sa.Column('schema_path_template', sa.String(length=500), nullable=False),
        sa.Column('external_id', sa.String(length=200), nullable=False),
        sa.Column('external_webhook_id', sa.String(length=200), nullable=False),
        sa.Column('webhook_url_host', sa.String(length=500), nullable=False),
        sa.Column('webhook_endpoint_id', sa.String(length=200), nullable=False),
        sa.Column('webhook_secret_token', sa.String(length=200), nullable=False),
        sa.Column('access_token', sa.String(length=500), nullable=False),
        sa.Column('expires_ts', sa.BigInteger(), nullable=False),
        sa.Column('refresh_token', sa.String(length=500), nullable=False),
        sa.ForeignKeyConstraint(['vcs_id'], ['vcs.id']),
        sa.ForeignKeyConstraint(['project_id'], ['project.id']),
        sa.UniqueConstraint('project_id'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_repository_webhook_endpoint_id', 'repository', ['webhook_endpoint_id'])

    # app_settings
    op.create_table('app_settings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('key', sa.String(length=100), nullable=False),
        sa.Column('value', sa.String(length=1000), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.UniqueConstraint('key'),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    op.drop_table('app_settings')
    op.drop_index('idx_repository_webhook_endpoint_id', table_name='repository')
    op.drop_table('repository')
    op.drop_table('project')
    op.drop_table('vcs')
    if op.get_bind().dialect.name == "postgresql":
        for enum_name in ("tenantmode", "workflowtype", "vcstype"):
            op.execute(f"DROP TYPE IF EXISTS {enum_name}")
