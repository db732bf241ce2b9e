"""
Article Controller Module

Parses article requests, validates bodies with ArticleSchema and shapes
service results into responses.
"""

from blogcms.schemas.article_schema import ArticleSchema
from blogcms.services import article_service
from blogcms.utils.enums import ArticleStatus
from blogcms.utils.http import ok, error, json_body, arg_int, arg_str, arg_optional_int, validate_schema


def _list_query():
    return {
        "page": arg_int("page", 1, min_value=1),
        "limit": arg_int("limit", 10, min_value=1, max_value=100),
        "keyword": arg_str("keyword"),
        "status": arg_str("status"),
        "tag_id": arg_optional_int("tagId"),
    }


def create_article_handler():
    """
    Create a new article.

    Body Parameters:
        - title (required)
        - content (required)
        - summary, coverImage (optional)
        - status (optional): 'DRAFT' or 'PUBLISHED' (default: DRAFT)
        - tagIds (optional): list of tag ids
    """
    data, errors = validate_schema(ArticleSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid article data", 400, details=errors)
    return ok(article_service.create_article(data), 201)


def list_articles_handler():
    """
    List articles with pagination and filtering.

    Query Parameters:
        - page: Page number (default: 1)
        - limit: Items per page (default: 10, max: 100)
        - keyword: Search in title, content and summary
        - status: 'DRAFT' or 'PUBLISHED'
        - tagId: Only articles with this tag
    """
    return ok(article_service.list_articles(**_list_query()))


def list_published_articles_handler():
    query = _list_query()
    query["status"] = ArticleStatus.PUBLISHED.value
    return ok(article_service.list_articles(**query))


def get_article_handler(article_id: int):
    return ok(article_service.get_article_by_id(article_id))


def get_article_by_slug_handler(slug: str):
    """Public read; every call counts one view."""
    return ok(article_service.get_article_by_slug(slug))


def update_article_handler(article_id: int):
    data, errors = validate_schema(ArticleSchema, json_body(), partial=True)
    if errors:
        return error("VALIDATION_ERROR", "Invalid article data", 400, details=errors)
    return ok(article_service.update_article(article_id, data))


def delete_article_handler(article_id: int):
    return ok(article_service.delete_article(article_id))
