from flask import Blueprint
from blogcms.utils.auth import require_auth
from blogcms.controllers.profile_controller import (
    get_profile_handler,
    list_profiles_handler,
    create_profile_handler,
    update_profile_handler,
    update_profile_by_id_handler,
    delete_profile_handler,
)

profile_bp = Blueprint("profile", __name__, url_prefix="/profile")


@profile_bp.get("")
def get_profile():
    return get_profile_handler()


@profile_bp.get("/all")
@require_auth
def list_profiles():
    return list_profiles_handler()


@profile_bp.post("")
@require_auth
def create_profile():
    return create_profile_handler()


@profile_bp.patch("")
@require_auth
def update_profile():
    return update_profile_handler()


@profile_bp.patch("/<int:id>")
@require_auth
def update_profile_by_id(id):
    return update_profile_by_id_handler(id)


@profile_bp.delete("/<int:id>")
@require_auth
def delete_profile(id):
    return delete_profile_handler(id)
