from blogcms.extensions import db
from datetime import datetime


class Tag(db.Model):
    __tablename__ = "tags"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(50), unique=True, nullable=False)
    color = db.Column(db.String(20), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    article_links = db.relationship("ArticleTag", back_populates="tag", cascade="all, delete-orphan")

    def to_dict(self, article_count=None):
        data = {
            "id": self.id,
            "name": self.name,
            "color": self.color or "",
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
        if article_count is not None:
            data["articleCount"] = article_count
        return data

    def __repr__(self):
        return f"<Tag {self.id}: {self.name}>"
