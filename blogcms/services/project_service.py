from typing import Optional, Dict, Any, List
from blogcms.extensions import db
from blogcms.models.project import Project
from blogcms.utils.errors import NotFoundError, ValidationError

FIELDS = ("title", "description", "image_url", "project_url", "github_url", "tech_stack", "featured")


def _get_or_404(project_id: int) -> Project:
    project = Project.query.filter_by(id=project_id).first()
    if not project:
        raise NotFoundError("Project not found")
    return project


def _apply(project: Project, data: Dict[str, Any]) -> None:
    for field in FIELDS:
        if field not in data:
            continue
        value = data[field]
        if field in ("title", "description"):
            value = (value or "").strip()
            if not value:
                raise ValidationError(f"{field.capitalize()} is required")
        elif field == "featured":
            value = bool(value)
        setattr(project, field, value)


def create_project(data: Dict[str, Any]) -> Dict[str, Any]:
    project = Project(featured=False)
    _apply(project, data)
    if not project.title or not project.description:
        raise ValidationError("Title and description are required")

    db.session.add(project)
    db.session.commit()
    return project.to_dict()


def list_projects(featured: Optional[bool] = None) -> List[Dict[str, Any]]:
    """Featured projects first, newest first within each group."""
    query = Project.query
    if featured is not None:
        query = query.filter_by(featured=featured)
    query = query.order_by(Project.featured.desc(), Project.created_at.desc(), Project.id.desc())
    return [p.to_dict() for p in query.all()]


def get_featured_projects() -> List[Dict[str, Any]]:
    return list_projects(featured=True)


def get_project(project_id: int) -> Dict[str, Any]:
    return _get_or_404(project_id).to_dict()


def update_project(project_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    project = _get_or_404(project_id)
    _apply(project, data)
    db.session.commit()
    return project.to_dict()


def delete_project(project_id: int) -> Dict[str, Any]:
    project = _get_or_404(project_id)
    view = project.to_dict()
    db.session.delete(project)
    db.session.commit()
    return view


def get_project_stats() -> Dict[str, int]:
    return {
        "total": Project.query.count(),
        "featured": Project.query.filter_by(featured=True).count(),
    }
