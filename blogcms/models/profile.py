from blogcms.extensions import db
from datetime import datetime

# The profile table holds one row, always under this key
PROFILE_ID = 1


class Profile(db.Model):
    __tablename__ = "profile"
    __table_args__ = (
        db.CheckConstraint(f"id = {PROFILE_ID}", name="ck_profile_single_row"),
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=False, default=PROFILE_ID)
    title = db.Column(db.String(255), nullable=True)
    avatar = db.Column(db.String(500), nullable=True)
    bio = db.Column(db.Text, nullable=True)
    github = db.Column(db.String(255), nullable=True)
    twitter = db.Column(db.String(255), nullable=True)
    linkedin = db.Column(db.String(255), nullable=True)
    email = db.Column(db.String(120), nullable=True)
    phone = db.Column(db.String(50), nullable=True)
    location = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "avatar": self.avatar,
            "bio": self.bio,
            "github": self.github,
            "twitter": self.twitter,
            "linkedin": self.linkedin,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
