from blogcms.models.user import User
from blogcms.models.article import Article
from blogcms.models.tag import Tag
from blogcms.models.article_tag import ArticleTag
from blogcms.models.comment import Comment
from blogcms.models.project import Project
from blogcms.models.profile import Profile, PROFILE_ID

__all__ = ["User", "Article", "Tag", "ArticleTag", "Comment", "Project", "Profile", "PROFILE_ID"]
