from blogcms.schemas.project_schema import ProjectSchema
from blogcms.services import project_service
from blogcms.utils.http import ok, error, json_body, arg_bool, validate_schema


def create_project_handler():
    data, errors = validate_schema(ProjectSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid project data", 400, details=errors)
    return ok(project_service.create_project(data), 201)


def list_projects_handler():
    """Query Parameters: featured ('true' / 'false', optional)"""
    return ok(project_service.list_projects(arg_bool("featured")))


def featured_projects_handler():
    return ok(project_service.get_featured_projects())


def project_stats_handler():
    return ok(project_service.get_project_stats())


def get_project_handler(project_id: int):
    return ok(project_service.get_project(project_id))


def update_project_handler(project_id: int):
    data, errors = validate_schema(ProjectSchema, json_body(), partial=True)
    if errors:
        return error("VALIDATION_ERROR", "Invalid project data", 400, details=errors)
    return ok(project_service.update_project(project_id, data))


def delete_project_handler(project_id: int):
    return ok(project_service.delete_project(project_id))
