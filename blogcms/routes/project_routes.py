from flask import Blueprint
from blogcms.utils.auth import require_auth
from blogcms.controllers.project_controller import (
    create_project_handler,
    list_projects_handler,
    featured_projects_handler,
    project_stats_handler,
    get_project_handler,
    update_project_handler,
    delete_project_handler,
)

project_bp = Blueprint("projects", __name__, url_prefix="/projects")


@project_bp.post("")
@require_auth
def create_project():
    return create_project_handler()


@project_bp.get("")
def list_projects():
    return list_projects_handler()


@project_bp.get("/featured")
def featured_projects():
    return featured_projects_handler()


@project_bp.get("/stats")
@require_auth
def project_stats():
    return project_stats_handler()


@project_bp.get("/<int:id>")
def get_project(id):
    return get_project_handler(id)


@project_bp.patch("/<int:id>")
@require_auth
def update_project(id):
    return update_project_handler(id)


@project_bp.delete("/<int:id>")
@require_auth
def delete_project(id):
    return delete_project_handler(id)
