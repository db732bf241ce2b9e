from blogcms.extensions import db
from datetime import datetime
from blogcms.utils.enums import ArticleStatus


class Article(db.Model):
    __tablename__ = "articles"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(300), unique=True, nullable=False, index=True)
    content = db.Column(db.Text, nullable=False)
    summary = db.Column(db.Text, nullable=True)
    cover_image = db.Column(db.String(500), nullable=True)
    view_count = db.Column(db.Integer, nullable=False, default=0)
    status = db.Column(db.String(20), nullable=False, default=ArticleStatus.DRAFT.value, index=True)
    is_published = db.Column(db.Boolean, nullable=False, default=False)
    published_at = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Children go with the article in the same flush
    tag_links = db.relationship(
        "ArticleTag",
        back_populates="article",
        cascade="all, delete-orphan",
        order_by="ArticleTag.id",
    )
    comments = db.relationship(
        "Comment",
        back_populates="article",
        cascade="all, delete-orphan",
    )

    def to_dict(self, include_content=True, comment_count=None):
        """Convert article to the JSON view object, tags included."""
        data = {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "summary": self.summary,
            "coverImage": self.cover_image,
            "viewCount": self.view_count,
            "status": self.status,
            "isPublished": self.is_published,
            "publishedAt": self.published_at.isoformat() if self.published_at else None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
            "tags": [link.to_dict() for link in self.tag_links],
        }

        if include_content:
            data["content"] = self.content

        if comment_count is not None:
            data["commentCount"] = comment_count

        return data

    def __repr__(self):
        return f"<Article {self.id}: {self.title}>"
