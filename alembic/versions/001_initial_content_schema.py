"""Initial content schema

Revision ID: 001_initial_content_schema
Revises:
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_content_schema'
down_revision = None
branch_labels = None
depends_on = None


def _aggregate_columns():
    return [
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('slug', sa.String(255), nullable=False),
    ]


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def _translation_table(name, parent_table, parent_key, *columns):
    op.create_table(
        name,
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(parent_key, sa.Integer(), nullable=False),
        sa.Column('language', sa.String(10), nullable=False),
        *columns,
        sa.ForeignKeyConstraint([parent_key], [f'{parent_table}.id'], ondelete='CASCADE'),
        sa.UniqueConstraint(parent_key, 'language', name=f'uq_{parent_key[:-3]}_translation_language'),
    )
    op.create_index(f'ix_{name}_{parent_key}', name, [parent_key])


def upgrade():
    # Aggregates
    op.create_table(
        'blogs',
        *_aggregate_columns(),
        sa.Column('image', sa.String(500), nullable=False, server_default=''),
        sa.Column('alt_text', sa.String(255), nullable=False, server_default=''),
        sa.Column('canonical_url', sa.String(500), nullable=False, server_default=''),
        sa.Column('date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('type', sa.Integer(), nullable=False, server_default='1'),
        *_timestamps(),
    )
    op.create_table(
        'banners',
        *_aggregate_columns(),
        sa.Column('image', sa.String(500), nullable=False, server_default=''),
        *_timestamps(),
    )
    op.create_table(
        'members',
        *_aggregate_columns(),
        sa.Column('image', sa.String(500), nullable=False, server_default=''),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('core', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('canonical_url', sa.String(500), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        'contacts',
        *_aggregate_columns(),
        sa.Column('phone', sa.String(50), nullable=False),
        sa.Column('mail', sa.String(255), nullable=False),
        *_timestamps(),
    )
    for table in ('blogs', 'banners', 'members', 'contacts'):
        op.create_index(f'ix_{table}_slug', table, ['slug'], unique=True)

    # Translations
    _translation_table(
        'blog_translations', 'blogs', 'blog_id',
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('meta_title', sa.String(255), nullable=False, server_default=''),
        sa.Column('meta_description', sa.String(160), nullable=False, server_default=''),
        sa.Column('og_title', sa.String(255), nullable=False, server_default=''),
        sa.Column('og_description', sa.String(500), nullable=False, server_default=''),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
    )
    _translation_table(
        'banner_translations', 'banners', 'banner_id',
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.String(1000), nullable=False, server_default=''),
        sa.Column('meta_description', sa.String(160), nullable=False, server_default=''),
        sa.Column('keywords', sa.JSON(), nullable=False),
    )
    _translation_table(
        'member_translations', 'members', 'member_id',
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('meta_title', sa.String(255), nullable=False, server_default=''),
        sa.Column('meta_description', sa.String(160), nullable=False, server_default=''),
        sa.Column('keywords', sa.JSON(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
    )
    _translation_table(
        'contact_translations', 'contacts', 'contact_id',
        sa.Column('address', sa.String(500), nullable=False),
        sa.Column('meta_description', sa.String(160), nullable=False, server_default=''),
        sa.Column('keywords', sa.JSON(), nullable=False),
    )

    # Back office
    op.create_table(
        'admins',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_admins_username', 'admins', ['username'], unique=True)

    op.create_table(
        'statistics',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('access_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('total_access_date', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('total_access_week', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('total_access_month', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_index('ix_statistics_date', 'statistics', ['date'], unique=True)


def downgrade():
    op.drop_index('ix_statistics_date', table_name='statistics')
    op.drop_table('statistics')
    op.drop_index('ix_admins_username', table_name='admins')
    op.drop_table('admins')

    for name, parent_key in (
        ('contact_translations', 'contact_id'),
        ('member_translations', 'member_id'),
        ('banner_translations', 'banner_id'),
        ('blog_translations', 'blog_id'),
    ):
        op.drop_index(f'ix_{name}_{parent_key}', table_name=name)
        op.drop_table(name)

    for table in ('contacts', 'members', 'banners', 'blogs'):
        op.drop_index(f'ix_{table}_slug', table_name=table)
        op.drop_table(table)
