"""initial blog schema

Revision ID: 3a9c1e7b5d20
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a9c1e7b5d20'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('username', sa.String(length=50), nullable=False),
            sa.Column('email', sa.String(length=120), nullable=False),
            sa.Column('password', sa.String(length=255), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_users_username', 'users', ['username'], unique=True)
        op.create_index('ix_users_email', 'users', ['email'], unique=True)

    if not insp.has_table('articles'):
        op.create_table(
            'articles',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('title', sa.String(length=255), nullable=False),
            sa.Column('slug', sa.String(length=300), nullable=False),
            sa.Column('content', sa.Text(), nullable=False),
            sa.Column('summary', sa.Text(), nullable=True),
            sa.Column('cover_image', sa.String(length=500), nullable=True),
            sa.Column('view_count', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('status', sa.String(length=20), nullable=False, server_default='DRAFT'),
            sa.Column('is_published', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('published_at', sa.DateTime(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_articles_slug', 'articles', ['slug'], unique=True)
        op.create_index('ix_articles_status', 'articles', ['status'])
        op.create_index('ix_articles_created_at', 'articles', ['created_at'])

    if not insp.has_table('tags'):
        op.create_table(
            'tags',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('name', sa.String(length=50), nullable=False, unique=True),
            sa.Column('color', sa.String(length=20), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )

    if not insp.has_table('article_tags'):
        op.create_table(
            'article_tags',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('article_id', sa.Integer(), sa.ForeignKey('articles.id', ondelete='CASCADE'), nullable=False),
            sa.Column('tag_id', sa.Integer(), sa.ForeignKey('tags.id', ondelete='CASCADE'), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.UniqueConstraint('article_id', 'tag_id', name='uq_article_tags_article_tag'),
        )
        op.create_index('ix_article_tags_article_id', 'article_tags', ['article_id'])
        op.create_index('ix_article_tags_tag_id', 'article_tags', ['tag_id'])

    if not insp.has_table('comments'):
        op.create_table(
            'comments',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('content', sa.Text(), nullable=False),
            sa.Column('author', sa.String(length=100), nullable=False),
            sa.Column('email', sa.String(length=120), nullable=False),
            sa.Column('website', sa.String(length=255), nullable=True),
            sa.Column('ip', sa.String(length=64), nullable=True),
            sa.Column('user_agent', sa.String(length=500), nullable=True),
            sa.Column('status', sa.String(length=20), nullable=False, server_default='PENDING'),
            sa.Column('article_id', sa.Integer(), sa.ForeignKey('articles.id', ondelete='CASCADE'), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_comments_status', 'comments', ['status'])
        op.create_index('ix_comments_article_id', 'comments', ['article_id'])
        op.create_index('ix_comments_created_at', 'comments', ['created_at'])

    if not insp.has_table('projects'):
        op.create_table(
            'projects',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('title', sa.String(length=255), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('image_url', sa.String(length=500), nullable=True),
            sa.Column('project_url', sa.String(length=500), nullable=True),
            sa.Column('github_url', sa.String(length=500), nullable=True),
            sa.Column('tech_stack', sa.String(length=500), nullable=True),
            sa.Column('featured', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_projects_featured', 'projects', ['featured'])
        op.create_index('ix_projects_created_at', 'projects', ['created_at'])

    if not insp.has_table('profile'):
        op.create_table(
            'profile',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=False),
            sa.Column('title', sa.String(length=255), nullable=True),
            sa.Column('avatar', sa.String(length=500), nullable=True),
            sa.Column('bio', sa.Text(), nullable=True),
            sa.Column('github', sa.String(length=255), nullable=True),
            sa.Column('twitter', sa.String(length=255), nullable=True),
            sa.Column('linkedin', sa.String(length=255), nullable=True),
            sa.Column('email', sa.String(length=120), nullable=True),
            sa.Column('phone', sa.String(length=50), nullable=True),
            sa.Column('location', sa.String(length=255), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.CheckConstraint('id = 1', name='ck_profile_single_row'),
        )


def downgrade():
    op.drop_table('profile')
    op.drop_table('projects')
    op.drop_table('comments')
    op.drop_table('article_tags')
    op.drop_table('tags')
    op.drop_table('articles')
    op.drop_table('users')
