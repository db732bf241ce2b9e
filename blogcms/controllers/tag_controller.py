from blogcms.schemas.tag_schema import TagSchema
from blogcms.services import tag_service
from blogcms.utils.http import ok, error, json_body, arg_int, validate_schema


def create_tag_handler():
    data, errors = validate_schema(TagSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid tag data", 400, details=errors)
    return ok(tag_service.create_tag(data), 201)


def list_tags_handler():
    return ok(tag_service.list_tags())


def popular_tags_handler():
    limit = arg_int("limit", 10, min_value=1, max_value=100)
    return ok(tag_service.find_popular(limit))


def get_tag_handler(tag_id: int):
    return ok(tag_service.get_tag(tag_id))


def update_tag_handler(tag_id: int):
    data, errors = validate_schema(TagSchema, json_body(), partial=True)
    if errors:
        return error("VALIDATION_ERROR", "Invalid tag data", 400, details=errors)
    return ok(tag_service.update_tag(tag_id, data))


def delete_tag_handler(tag_id: int):
    return ok(tag_service.delete_tag(tag_id))
