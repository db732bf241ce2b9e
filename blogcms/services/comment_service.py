"""
Comment Service Module

Visitor comments on articles and their moderation (approve / reject).
"""

import logging
from typing import Optional, Dict, Any
from sqlalchemy import or_
from sqlalchemy.orm import joinedload
from blogcms.extensions import db
from blogcms.models.article import Article
from blogcms.models.comment import Comment
from blogcms.utils.enums import CommentStatus
from blogcms.utils.errors import NotFoundError, ValidationError
from blogcms.utils.http import paginated
from blogcms.utils.query import like_term, LIKE_ESCAPE

logger = logging.getLogger(__name__)

STATUSES = [e.value for e in CommentStatus]


def _get_or_404(comment_id: int) -> Comment:
    comment = (
        Comment.query.options(joinedload(Comment.article))
        .filter_by(id=comment_id)
        .first()
    )
    if not comment:
        raise NotFoundError("Comment not found")
    return comment


def _required(value: Optional[str], label: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"{label} is required")
    return value


def create_comment(data: Dict[str, Any], ip: Optional[str] = None, user_agent: Optional[str] = None) -> Dict[str, Any]:
    """
    Create a comment on an existing article.

    Status is left to the column default (PENDING).

    Raises:
        NotFoundError: article_id does not reference an article
        ValidationError: blank author or content
    """
    article_id = data.get("article_id")
    if article_id is None or not Article.query.filter_by(id=article_id).first():
        raise NotFoundError("Article not found")

    content = _required(data.get("content"), "Content")
    author = _required(data.get("author"), "Author")

    comment = Comment(
        content=content,
        author=author,
        email=data["email"].strip(),
        website=data.get("website") or None,
        ip=ip,
        user_agent=user_agent,
        article_id=article_id,
    )
    db.session.add(comment)
    db.session.commit()

    logger.info("New comment %s on article %s", comment.id, article_id)
    return comment.to_dict()


def list_comments(
    page: int = 1,
    limit: int = 10,
    article_id: Optional[int] = None,
    status: Optional[str] = None,
    keyword: Optional[str] = None,
) -> Dict[str, Any]:
    query = Comment.query.options(joinedload(Comment.article))

    if article_id is not None:
        query = query.filter_by(article_id=article_id)

    if status:
        if status not in STATUSES:
            raise ValidationError(f"Status must be one of {', '.join(STATUSES)}")
        query = query.filter_by(status=status)

    if keyword:
        term = like_term(keyword)
        query = query.filter(or_(
            Comment.author.ilike(term, escape=LIKE_ESCAPE),
            Comment.email.ilike(term, escape=LIKE_ESCAPE),
            Comment.content.ilike(term, escape=LIKE_ESCAPE),
        ))

    query = query.order_by(Comment.created_at.desc(), Comment.id.desc())
    pagination = query.paginate(page=page, per_page=limit, error_out=False)

    return paginated([c.to_dict() for c in pagination.items], pagination, page, limit)


def get_comment(comment_id: int) -> Dict[str, Any]:
    return _get_or_404(comment_id).to_dict()


def update_comment(comment_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    comment = _get_or_404(comment_id)

    if data.get("content") is not None:
        comment.content = _required(data["content"], "Content")

    status = data.get("status")
    if status:
        if status not in STATUSES:
            raise ValidationError(f"Status must be one of {', '.join(STATUSES)}")
        if status != comment.status:
            logger.info("Comment %s: %s -> %s", comment.id, comment.status, status)
        comment.status = status

    db.session.commit()
    return comment.to_dict()


def approve_comment(comment_id: int) -> Dict[str, Any]:
    return update_comment(comment_id, {"status": CommentStatus.APPROVED.value})


def reject_comment(comment_id: int) -> Dict[str, Any]:
    return update_comment(comment_id, {"status": CommentStatus.REJECTED.value})


def delete_comment(comment_id: int) -> Dict[str, Any]:
    comment = _get_or_404(comment_id)
    view = comment.to_dict()
    db.session.delete(comment)
    db.session.commit()
    return view


def get_comment_stats(article_id: Optional[int] = None) -> Dict[str, int]:
    """Total and per-status comment counts, optionally for one article."""
    def count(status=None):
        query = Comment.query
        if article_id is not None:
            query = query.filter_by(article_id=article_id)
        if status:
            query = query.filter_by(status=status)
        return query.count()

    return {
        "total": count(),
        "pending": count(CommentStatus.PENDING.value),
        "approved": count(CommentStatus.APPROVED.value),
        "rejected": count(CommentStatus.REJECTED.value),
    }
