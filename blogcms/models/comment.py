from blogcms.extensions import db
from datetime import datetime
from blogcms.utils.enums import CommentStatus


class Comment(db.Model):
    __tablename__ = "comments"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    content = db.Column(db.Text, nullable=False)
    author = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    website = db.Column(db.String(255), nullable=True)
    ip = db.Column(db.String(64), nullable=True)
    user_agent = db.Column(db.String(500), nullable=True)
    status = db.Column(db.String(20), nullable=False, default=CommentStatus.PENDING.value, index=True)
    article_id = db.Column(db.Integer, db.ForeignKey("articles.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    article = db.relationship("Article", back_populates="comments")

    def to_dict(self):
        return {
            "id": self.id,
            "content": self.content,
            "author": self.author,
            "email": self.email,
            "website": self.website,
            "ip": self.ip,
            "userAgent": self.user_agent,
            "status": self.status,
            "articleId": self.article_id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
            "article": {
                "id": self.article.id,
                "title": self.article.title,
                "slug": self.article.slug,
            } if self.article else None,
        }
