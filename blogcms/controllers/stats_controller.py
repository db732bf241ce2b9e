from blogcms.services import stats_service
from blogcms.utils.http import ok, arg_optional_int


def overview_handler():
    return ok(stats_service.get_overview())


def article_stats_handler():
    return ok(stats_service.get_article_stats())


def monthly_stats_handler():
    """Query Parameters: year (default: current year)"""
    return ok(stats_service.get_monthly_stats(arg_optional_int("year")))


def tag_stats_handler():
    return ok(stats_service.get_tag_stats())


def recent_activity_handler():
    return ok(stats_service.get_recent_activity())
