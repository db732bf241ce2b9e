"""
Article Routes Module

Reads are public; writes need a bearer token.
"""

from flask import Blueprint
from blogcms.utils.auth import require_auth
from blogcms.controllers.article_controller import (
    create_article_handler,
    list_articles_handler,
    list_published_articles_handler,
    get_article_handler,
    get_article_by_slug_handler,
    update_article_handler,
    delete_article_handler,
)

article_bp = Blueprint("articles", __name__, url_prefix="/articles")


@article_bp.post("")
@require_auth
def create_article():
    return create_article_handler()


@article_bp.get("")
def list_articles():
    return list_articles_handler()


@article_bp.get("/published")
def list_published_articles():
    return list_published_articles_handler()


@article_bp.get("/<int:id>")
def get_article(id):
    return get_article_handler(id)


@article_bp.get("/slug/<slug>")
def get_article_by_slug(slug):
    return get_article_by_slug_handler(slug)


@article_bp.patch("/<int:id>")
@require_auth
def update_article(id):
    return update_article_handler(id)


@article_bp.delete("/<int:id>")
@require_auth
def delete_article(id):
    return delete_article_handler(id)
