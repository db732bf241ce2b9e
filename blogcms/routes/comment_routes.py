from flask import Blueprint
from blogcms.utils.auth import require_auth
from blogcms.controllers.comment_controller import (
    create_comment_handler,
    list_comments_handler,
    list_pending_comments_handler,
    list_approved_comments_handler,
    comment_stats_handler,
    get_comment_handler,
    update_comment_handler,
    approve_comment_handler,
    reject_comment_handler,
    delete_comment_handler,
)

comment_bp = Blueprint("comments", __name__, url_prefix="/comments")


# Visitors comment without an account
@comment_bp.post("")
def create_comment():
    return create_comment_handler()


@comment_bp.get("")
def list_comments():
    return list_comments_handler()


@comment_bp.get("/pending")
@require_auth
def list_pending():
    return list_pending_comments_handler()


@comment_bp.get("/approved")
def list_approved():
    return list_approved_comments_handler()


@comment_bp.get("/stats")
@require_auth
def stats():
    return comment_stats_handler()


@comment_bp.get("/<int:id>")
def get_comment(id):
    return get_comment_handler(id)


@comment_bp.patch("/<int:id>")
@require_auth
def update_comment(id):
    return update_comment_handler(id)


@comment_bp.patch("/<int:id>/approve")
@require_auth
def approve_comment(id):
    return approve_comment_handler(id)


@comment_bp.patch("/<int:id>/reject")
@require_auth
def reject_comment(id):
    return reject_comment_handler(id)


@comment_bp.delete("/<int:id>")
@require_auth
def delete_comment(id):
    return delete_comment_handler(id)
