from enum import Enum


class ArticleStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"


class CommentStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ActivityType(str, Enum):
    ARTICLE = "article"
    COMMENT = "comment"
    PROJECT = "project"
