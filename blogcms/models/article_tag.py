from blogcms.extensions import db
from datetime import datetime


class ArticleTag(db.Model):
    __tablename__ = "article_tags"
    __table_args__ = (
        db.UniqueConstraint("article_id", "tag_id", name="uq_article_tags_article_tag"),
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    article_id = db.Column(db.Integer, db.ForeignKey("articles.id", ondelete="CASCADE"), nullable=False, index=True)
    tag_id = db.Column(db.Integer, db.ForeignKey("tags.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    article = db.relationship("Article", back_populates="tag_links")
    tag = db.relationship("Tag", back_populates="article_links")

    def to_dict(self):
        return {
            "id": self.id,
            "articleId": self.article_id,
            "tagId": self.tag_id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "tag": self.tag.to_dict() if self.tag else None,
        }
