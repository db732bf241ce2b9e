from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from blogcms.extensions import db
from blogcms.utils.http import ok


def home_index():
    return ok({"message": "Blog CMS API is running"})


def health_check():
    db_status = "healthy"
    try:
        db.session.execute(db.text("SELECT 1"))
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.warning("Health check failed: %s", e)
        db_status = "unhealthy"

    return ok({"status": "online", "database": db_status}, 200 if db_status == "healthy" else 503)
