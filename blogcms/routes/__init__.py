from .home_routes import home_bp
from .auth_routes import auth_bp
from .article_routes import article_bp
from .tag_routes import tag_bp
from .comment_routes import comment_bp
from .project_routes import project_bp
from .profile_routes import profile_bp
from .stats_routes import stats_bp


def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(article_bp)
    app.register_blueprint(tag_bp)
    app.register_blueprint(comment_bp)
    app.register_blueprint(project_bp)
    app.register_blueprint(profile_bp)
    app.register_blueprint(stats_bp)
