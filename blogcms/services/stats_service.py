"""
Stats Service Module

Read-only dashboard aggregates:
- Overview counts
- Article status counts and most viewed articles
- Per-month activity for a year
- Tag usage
- Recent activity feed merged from articles, comments and projects
"""

from dataclasses import dataclass
from datetime import datetime
from itertools import chain
from operator import attrgetter
from typing import ClassVar, Dict, Any, List, Optional, Union
from sqlalchemy import select, func, extract
from sqlalchemy.orm import joinedload
from blogcms.extensions import db
from blogcms.models.article import Article
from blogcms.models.comment import Comment
from blogcms.models.project import Project
from blogcms.models.tag import Tag
from blogcms.services.article_service import comment_counts
from blogcms.services.tag_service import tags_by_article_count
from blogcms.utils.enums import ArticleStatus, CommentStatus, ActivityType
from blogcms.utils.errors import ValidationError

RECENT_PER_KIND = 5
RECENT_LIMIT = 10
TOP_VIEWED_LIMIT = 10


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _count(model, *criteria):
    stmt = select(func.count(model.id))
    if criteria:
        stmt = stmt.where(*criteria)
    return stmt.correlate(None).scalar_subquery()


def get_overview() -> Dict[str, int]:
    """All six dashboard numbers in one round trip."""
    total_views = (
        select(func.coalesce(func.sum(Article.view_count), 0))
        .correlate(None)
        .scalar_subquery()
    )
    row = db.session.execute(select(
        _count(Article).label("articles"),
        _count(Comment).label("comments"),
        _count(Tag).label("tags"),
        _count(Project).label("projects"),
        total_views.label("total_views"),
        _count(Comment, Comment.status == CommentStatus.PENDING.value).label("pending_comments"),
    )).one()

    return {
        "articles": row.articles,
        "comments": row.comments,
        "tags": row.tags,
        "projects": row.projects,
        "totalViews": int(row.total_views or 0),
        "pendingComments": row.pending_comments,
    }


def get_article_stats() -> Dict[str, Any]:
    published = Article.query.filter_by(status=ArticleStatus.PUBLISHED.value).count()
    draft = Article.query.filter_by(status=ArticleStatus.DRAFT.value).count()
    total = Article.query.count()

    top = (
        Article.query
        .order_by(Article.view_count.desc(), Article.id.asc())
        .limit(TOP_VIEWED_LIMIT)
        .all()
    )
    counts = comment_counts([a.id for a in top])

    return {
        "published": published,
        "draft": draft,
        "total": total,
        "topViewed": [
            {
                "id": a.id,
                "title": a.title,
                "viewCount": a.view_count,
                "createdAt": _iso(a.created_at),
                "commentCount": counts.get(a.id, 0),
            }
            for a in top
        ],
    }


def _by_month(column, created_at, start: datetime, end: datetime) -> Dict[int, int]:
    month = extract("month", created_at)
    rows = (
        db.session.query(month, column)
        .filter(created_at >= start, created_at < end)
        .group_by(month)
        .all()
    )
    return {int(m): int(value or 0) for m, value in rows}


def get_monthly_stats(year: Optional[int] = None) -> Dict[str, Any]:
    """Article, comment and view totals for each of the 12 months of ``year``."""
    if year is None:
        year = datetime.utcnow().year
    if not 1 <= year < 9999:
        raise ValidationError("Year out of range")

    start = datetime(year, 1, 1)
    end = datetime(year + 1, 1, 1)

    articles = _by_month(func.count(Article.id), Article.created_at, start, end)
    comments = _by_month(func.count(Comment.id), Comment.created_at, start, end)
    views = _by_month(func.sum(Article.view_count), Article.created_at, start, end)

    # Every month is reported, including ones without rows
    data = [
        {
            "month": month,
            "articles": articles.get(month, 0),
            "comments": comments.get(month, 0),
            "views": views.get(month, 0),
        }
        for month in range(1, 13)
    ]
    return {"year": year, "data": data}


def get_tag_stats() -> List[Dict[str, Any]]:
    return [
        {"id": tag.id, "name": tag.name, "color": tag.color or "", "articleCount": count}
        for tag, count in tags_by_article_count()
    ]


@dataclass(frozen=True)
class ArticleActivity:
    id: int
    title: str
    created_at: datetime
    type: ClassVar[str] = ActivityType.ARTICLE.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "id": self.id, "title": self.title, "createdAt": _iso(self.created_at)}


@dataclass(frozen=True)
class CommentActivity:
    id: int
    author: str
    content: str
    created_at: datetime
    article_id: int
    article_title: str
    type: ClassVar[str] = ActivityType.COMMENT.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "id": self.id,
            "author": self.author,
            "content": self.content,
            "createdAt": _iso(self.created_at),
            "article": {"id": self.article_id, "title": self.article_title},
        }


@dataclass(frozen=True)
class ProjectActivity:
    id: int
    title: str
    created_at: datetime
    type: ClassVar[str] = ActivityType.PROJECT.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "id": self.id, "title": self.title, "createdAt": _iso(self.created_at)}


RecentActivity = Union[ArticleActivity, CommentActivity, ProjectActivity]


def merge_activities(*groups: List[RecentActivity], limit: int = RECENT_LIMIT) -> List[RecentActivity]:
    """Merge activity lists newest first and keep the first ``limit``."""
    merged = sorted(chain(*groups), key=attrgetter("created_at"), reverse=True)
    return merged[:limit]


def get_recent_activity() -> Dict[str, Any]:
    articles = [
        ArticleActivity(id=a.id, title=a.title, created_at=a.created_at)
        for a in Article.query.order_by(Article.created_at.desc()).limit(RECENT_PER_KIND)
    ]
    comments = [
        CommentActivity(
            id=c.id,
            author=c.author,
            content=c.content,
            created_at=c.created_at,
            article_id=c.article_id,
            article_title=c.article.title if c.article else "",
        )
        for c in (
            Comment.query.options(joinedload(Comment.article))
            .order_by(Comment.created_at.desc())
            .limit(RECENT_PER_KIND)
        )
    ]
    projects = [
        ProjectActivity(id=p.id, title=p.title, created_at=p.created_at)
        for p in Project.query.order_by(Project.created_at.desc()).limit(RECENT_PER_KIND)
    ]

    items = merge_activities(articles, comments, projects)
    return {"items": [item.to_dict() for item in items]}
