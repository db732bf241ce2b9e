from flask import Blueprint
from blogcms.utils.auth import require_auth
from blogcms.controllers.stats_controller import (
    overview_handler,
    article_stats_handler,
    monthly_stats_handler,
    tag_stats_handler,
    recent_activity_handler,
)

stats_bp = Blueprint("stats", __name__, url_prefix="/stats")


@stats_bp.get("/overview")
@require_auth
def overview():
    return overview_handler()


@stats_bp.get("/articles")
@require_auth
def article_stats():
    return article_stats_handler()


@stats_bp.get("/monthly")
@require_auth
def monthly_stats():
    return monthly_stats_handler()


@stats_bp.get("/tags")
@require_auth
def tag_stats():
    return tag_stats_handler()


@stats_bp.get("/recent-activity")
@require_auth
def recent_activity():
    return recent_activity_handler()
