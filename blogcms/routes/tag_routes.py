from flask import Blueprint
from blogcms.utils.auth import require_auth
from blogcms.controllers.tag_controller import (
    create_tag_handler,
    list_tags_handler,
    popular_tags_handler,
    get_tag_handler,
    update_tag_handler,
    delete_tag_handler,
)

tag_bp = Blueprint("tags", __name__, url_prefix="/tags")


@tag_bp.route("", methods=["POST"])
@require_auth
def create():
    return create_tag_handler()


@tag_bp.route("", methods=["GET"])
def list_tags():
    return list_tags_handler()


@tag_bp.route("/popular", methods=["GET"])
def popular():
    return popular_tags_handler()


@tag_bp.route("/<int:id>", methods=["GET"])
def get(id):
    return get_tag_handler(id)


@tag_bp.route("/<int:id>", methods=["PATCH"])
@require_auth
def update(id):
    return update_tag_handler(id)


@tag_bp.route("/<int:id>", methods=["DELETE"])
@require_auth
def delete(id):
    return delete_tag_handler(id)
