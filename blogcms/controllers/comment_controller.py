from flask import request
from blogcms.schemas.comment_schema import CommentCreateSchema, CommentUpdateSchema
from blogcms.services import comment_service
from blogcms.utils.enums import CommentStatus
from blogcms.utils.http import ok, error, json_body, arg_int, arg_str, arg_optional_int, validate_schema


def _list_query():
    return {
        "page": arg_int("page", 1, min_value=1),
        "limit": arg_int("limit", 10, min_value=1, max_value=100),
        "article_id": arg_optional_int("articleId"),
        "status": arg_str("status"),
        "keyword": arg_str("keyword"),
    }


def create_comment_handler():
    """Public endpoint; records the caller's address and user agent."""
    data, errors = validate_schema(CommentCreateSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid comment data", 400, details=errors)

    comment = comment_service.create_comment(
        data,
        ip=request.remote_addr,
        user_agent=request.headers.get("User-Agent"),
    )
    return ok(comment, 201)


def list_comments_handler():
    """
    Query Parameters:
        - page, limit: pagination (default 1 / 10, max 100)
        - articleId: Comments of one article
        - status: PENDING, APPROVED or REJECTED
        - keyword: Search author, email and content
    """
    return ok(comment_service.list_comments(**_list_query()))


def list_pending_comments_handler():
    query = _list_query()
    query["status"] = CommentStatus.PENDING.value
    return ok(comment_service.list_comments(**query))


def list_approved_comments_handler():
    query = _list_query()
    query["status"] = CommentStatus.APPROVED.value
    return ok(comment_service.list_comments(**query))


def comment_stats_handler():
    return ok(comment_service.get_comment_stats(arg_optional_int("articleId")))


def get_comment_handler(comment_id: int):
    return ok(comment_service.get_comment(comment_id))


def update_comment_handler(comment_id: int):
    data, errors = validate_schema(CommentUpdateSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid comment data", 400, details=errors)
    return ok(comment_service.update_comment(comment_id, data))


def approve_comment_handler(comment_id: int):
    return ok(comment_service.approve_comment(comment_id))


def reject_comment_handler(comment_id: int):
    return ok(comment_service.reject_comment(comment_id))


def delete_comment_handler(comment_id: int):
    return ok(comment_service.delete_comment(comment_id))
