"""
Article Service Module

Handles all article-related business logic including:
- CRUD operations
- Slug generation
- Publish status side effects (is_published / published_at)
- Tag link reconciliation
- Pagination and filtering
"""

import logging
import re
import time
from datetime import datetime
from typing import Optional, Dict, Any, List, Iterable
from sqlalchemy import func, or_, update
from blogcms.extensions import db
from blogcms.models.article import Article
from blogcms.models.article_tag import ArticleTag
from blogcms.models.comment import Comment
from blogcms.models.tag import Tag
from blogcms.utils.enums import ArticleStatus
from blogcms.utils.errors import NotFoundError, ValidationError
from blogcms.utils.http import paginated
from blogcms.utils.query import like_term, LIKE_ESCAPE

logger = logging.getLogger(__name__)

STATUSES = [e.value for e in ArticleStatus]


def generate_slug(title: str) -> str:
    """
    Generate URL-friendly slug from title.
    Lowercases, drops anything that is not a word character, whitespace or
    hyphen, then turns whitespace runs into single hyphens.
    """
    slug = title.lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    slug = slug.strip("-")
    return slug or "article"


def _slug_taken(slug: str) -> bool:
    return Article.query.filter_by(slug=slug).first() is not None


def unique_slug(title: str) -> str:
    """Slug for ``title``, suffixed with the current timestamp when already used."""
    base_slug = generate_slug(title)
    if not _slug_taken(base_slug):
        return base_slug

    stamp = int(time.time() * 1000)
    slug = f"{base_slug}-{stamp}"
    counter = 1
    while _slug_taken(slug):
        slug = f"{base_slug}-{stamp}-{counter}"
        counter += 1
    return slug


def comment_counts(article_ids: List[int]) -> Dict[int, int]:
    if not article_ids:
        return {}
    rows = (
        db.session.query(Comment.article_id, func.count(Comment.id))
        .filter(Comment.article_id.in_(article_ids))
        .group_by(Comment.article_id)
        .all()
    )
    return {article_id: count for article_id, count in rows}


def _article_view(article: Article) -> Dict[str, Any]:
    counts = comment_counts([article.id])
    return article.to_dict(comment_count=counts.get(article.id, 0))


def _normalize_tag_ids(tag_ids: Iterable[int]) -> List[int]:
    """De-duplicate tag ids (first occurrence wins) and make sure they all exist."""
    unique_ids = list(dict.fromkeys(tag_ids))
    if not unique_ids:
        return []

    found = {row.id for row in db.session.query(Tag.id).filter(Tag.id.in_(unique_ids)).all()}
    missing = [tag_id for tag_id in unique_ids if tag_id not in found]
    if missing:
        raise ValidationError(f"Unknown tag ids: {', '.join(str(i) for i in missing)}")
    return unique_ids


def _sync_tags(article: Article, tag_ids: Iterable[int]) -> None:
    """Make the article's tag links exactly ``tag_ids``, touching only the difference."""
    wanted = _normalize_tag_ids(tag_ids)
    current = {link.tag_id: link for link in list(article.tag_links)}

    for tag_id, link in current.items():
        if tag_id not in wanted:
            article.tag_links.remove(link)

    for tag_id in wanted:
        if tag_id not in current:
            article.tag_links.append(ArticleTag(tag_id=tag_id))


def _get_or_404(article_id: int) -> Article:
    article = Article.query.filter_by(id=article_id).first()
    if not article:
        raise NotFoundError("Article not found")
    return article


def _clean_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def create_article(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Create a new article.

    Args:
        data: loaded ArticleSchema payload (title, content, summary,
            cover_image, status, tag_ids)

    Returns:
        Article view with tags and comment count

    Raises:
        ValidationError: empty title/content, bad status or unknown tag ids
    """
    title = (data.get("title") or "").strip()
    content = data.get("content") or ""
    if not title:
        raise ValidationError("Title is required")
    if not content.strip():
        raise ValidationError("Content is required")

    status = data.get("status") or ArticleStatus.DRAFT.value
    if status not in STATUSES:
        raise ValidationError(f"Status must be one of {', '.join(STATUSES)}")

    tag_ids = _normalize_tag_ids(data.get("tag_ids") or [])
    published = status == ArticleStatus.PUBLISHED.value

    article = Article(
        title=title,
        slug=unique_slug(title),
        content=content,
        summary=_clean_optional(data.get("summary")),
        cover_image=_clean_optional(data.get("cover_image")),
        status=status,
        is_published=published,
        published_at=datetime.utcnow() if published else None,
    )
    for tag_id in tag_ids:
        article.tag_links.append(ArticleTag(tag_id=tag_id))

    db.session.add(article)
    db.session.commit()

    logger.info("Created article %s (%s)", article.id, article.slug)
    return _article_view(article)


def list_articles(
    page: int = 1,
    limit: int = 10,
    keyword: Optional[str] = None,
    status: Optional[str] = None,
    tag_id: Optional[int] = None,
) -> Dict[str, Any]:
    """
    List articles newest first.

    Args:
        page: Page number (starting from 1)
        limit: Items per page
        keyword: Matched against title, content or summary
        status: 'DRAFT' or 'PUBLISHED'
        tag_id: Only articles linked to this tag

    Returns:
        {data, pagination}
    """
    query = Article.query

    if keyword:
        term = like_term(keyword)
        query = query.filter(or_(
            Article.title.ilike(term, escape=LIKE_ESCAPE),
            Article.content.ilike(term, escape=LIKE_ESCAPE),
            Article.summary.ilike(term, escape=LIKE_ESCAPE),
        ))

    if status:
        if status not in STATUSES:
            raise ValidationError(f"Status must be one of {', '.join(STATUSES)}")
        query = query.filter_by(status=status)

    if tag_id is not None:
        query = query.filter(Article.tag_links.any(ArticleTag.tag_id == tag_id))

    query = query.order_by(Article.created_at.desc(), Article.id.desc())
    pagination = query.paginate(page=page, per_page=limit, error_out=False)

    counts = comment_counts([a.id for a in pagination.items])
    items = [a.to_dict(comment_count=counts.get(a.id, 0)) for a in pagination.items]
    return paginated(items, pagination, page, limit)


def get_article_by_id(article_id: int) -> Dict[str, Any]:
    return _article_view(_get_or_404(article_id))


def get_article_by_slug(slug: str) -> Dict[str, Any]:
    """
    Get article by slug and count the read.

    The increment is a single UPDATE so concurrent reads never lose a view;
    updated_at is pinned so reads don't look like edits.
    """
    article = Article.query.filter_by(slug=slug).first()
    if not article:
        raise NotFoundError("Article not found")

    db.session.execute(
        update(Article)
        .where(Article.id == article.id)
        .values(view_count=Article.view_count + 1, updated_at=Article.updated_at)
        .execution_options(synchronize_session=False)
    )
    db.session.commit()

    return _article_view(article)


def update_article(article_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Update an existing article.

    Only keys present in ``data`` are touched. ``tag_ids`` (even empty)
    replaces the tag set. Moving to PUBLISHED from an unpublished state
    stamps published_at; moving to DRAFT clears is_published but keeps
    published_at.
    """
    article = _get_or_404(article_id)

    if "title" in data:
        title = (data.get("title") or "").strip()
        if not title:
            raise ValidationError("Title is required")
        article.title = title

    if "content" in data:
        content = data.get("content") or ""
        if not content.strip():
            raise ValidationError("Content is required")
        article.content = content

    if "summary" in data:
        article.summary = _clean_optional(data.get("summary"))

    if "cover_image" in data:
        article.cover_image = _clean_optional(data.get("cover_image"))

    status = data.get("status")
    if status:
        if status not in STATUSES:
            raise ValidationError(f"Status must be one of {', '.join(STATUSES)}")
        if status == ArticleStatus.PUBLISHED.value and not article.is_published:
            article.is_published = True
            article.published_at = datetime.utcnow()
        elif status == ArticleStatus.DRAFT.value:
            article.is_published = False
        article.status = status

    if "tag_ids" in data:
        _sync_tags(article, data.get("tag_ids") or [])

    db.session.commit()

    return _article_view(article)


def delete_article(article_id: int) -> Dict[str, Any]:
    """Delete an article together with its tag links and comments."""
    article = _get_or_404(article_id)
    view = _article_view(article)

    db.session.delete(article)
    db.session.commit()

    logger.info("Deleted article %s (%s)", article_id, view["slug"])
    return view
