from datetime import datetime
from blogcms import create_app
from blogcms.extensions import db
from blogcms.models import Article, ArticleTag, Comment, Profile, Project, Tag, PROFILE_ID
from blogcms.services.article_service import generate_slug

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()

    def ensure_tag(name, color):
        tag = Tag.query.filter_by(name=name).first()
        if not tag:
            tag = Tag(name=name, color=color)
            db.session.add(tag)
            db.session.flush()
        return tag

    python = ensure_tag("Python", "#3776ab")
    flask = ensure_tag("Flask", "#000000")
    notes = ensure_tag("Notes", "#f59e0b")

    def ensure_article(title, content, summary, tags, published=True):
        slug = generate_slug(title)
        article = Article.query.filter_by(slug=slug).first()
        if not article:
            article = Article(
                title=title,
                slug=slug,
                content=content,
                summary=summary,
                status="PUBLISHED" if published else "DRAFT",
                is_published=published,
                published_at=datetime.utcnow() if published else None,
            )
            article.tag_links = [ArticleTag(tag_id=t.id) for t in tags]
            db.session.add(article)
            db.session.flush()
        return article

    hello = ensure_article(
        "Hello World",
        "# Hello\n\nFirst post on the new blog.",
        "The obligatory first post",
        [notes],
    )
    ensure_article(
        "Building a Blog API with Flask",
        "Blueprints, services and SQLAlchemy models.",
        "How this site's backend is put together",
        [python, flask],
    )
    ensure_article("Drafting Ideas", "Work in progress.", None, [notes], published=False)

    if not Comment.query.filter_by(article_id=hello.id).first():
        db.session.add(Comment(
            content="Welcome aboard!",
            author="Visitor",
            email="visitor@example.com",
            article_id=hello.id,
        ))

    if not Project.query.filter_by(title="blogcms").first():
        db.session.add(Project(
            title="blogcms",
            description="The API behind this blog.",
            tech_stack="Flask, SQLAlchemy, marshmallow",
            github_url="https://github.com/example/blogcms",
            featured=True,
        ))

    if not Profile.query.filter_by(id=PROFILE_ID).first():
        db.session.add(Profile(id=PROFILE_ID, title="My Blog", bio="Welcome to my blog", email=""))

    db.session.commit()

    print("Seed completed.")
