from typing import Dict, Any, List, Optional
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from blogcms.extensions import db
from blogcms.models.tag import Tag
from blogcms.models.article_tag import ArticleTag
from blogcms.utils.errors import NotFoundError, ConflictError, ValidationError


def _with_counts():
    """Tags joined with the number of linked articles."""
    article_count = func.count(ArticleTag.id).label("article_count")
    query = (
        db.session.query(Tag, article_count)
        .outerjoin(ArticleTag, ArticleTag.tag_id == Tag.id)
        .group_by(Tag.id)
    )
    return query, article_count


def _get_or_404(tag_id: int) -> Tag:
    tag = Tag.query.filter_by(id=tag_id).first()
    if not tag:
        raise NotFoundError("Tag not found")
    return tag


def _commit_unique_name() -> None:
    try:
        db.session.commit()
    except IntegrityError:
        # a concurrent request took the name after our check
        db.session.rollback()
        raise ConflictError("Tag name already exists")


def _article_count(tag_id: int) -> int:
    return ArticleTag.query.filter_by(tag_id=tag_id).count()


def create_tag(data: Dict[str, Any]) -> Dict[str, Any]:
    name = (data.get("name") or "").strip()
    if not name:
        raise ValidationError("Name is required")

    if Tag.query.filter_by(name=name).first():
        raise ConflictError("Tag name already exists")

    tag = Tag(name=name, color=data.get("color"))
    db.session.add(tag)
    _commit_unique_name()
    return tag.to_dict()


def list_tags() -> List[Dict[str, Any]]:
    query, _ = _with_counts()
    rows = query.order_by(Tag.created_at.desc(), Tag.id.desc()).all()
    return [tag.to_dict(article_count=count) for tag, count in rows]


def get_tag(tag_id: int) -> Dict[str, Any]:
    tag = _get_or_404(tag_id)
    return tag.to_dict(article_count=_article_count(tag.id))


def update_tag(tag_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    tag = _get_or_404(tag_id)

    if data.get("name") is not None:
        name = data["name"].strip()
        if not name:
            raise ValidationError("Name is required")
        # Renaming to its own current name is fine
        existing = Tag.query.filter(Tag.name == name, Tag.id != tag_id).first()
        if existing:
            raise ConflictError("Tag name already exists")
        tag.name = name

    if "color" in data:
        tag.color = data.get("color")

    _commit_unique_name()
    return tag.to_dict()


def delete_tag(tag_id: int) -> Dict[str, Any]:
    tag = _get_or_404(tag_id)
    view = tag.to_dict()
    db.session.delete(tag)
    db.session.commit()
    return view


def tags_by_article_count(limit: Optional[int] = None):
    """(Tag, article_count) rows, most used first."""
    query, article_count = _with_counts()
    query = query.order_by(article_count.desc(), Tag.id.asc())
    if limit:
        query = query.limit(limit)
    return query.all()


def find_popular(limit: int = 10) -> List[Dict[str, Any]]:
    return [tag.to_dict(article_count=count) for tag, count in tags_by_article_count(limit)]
