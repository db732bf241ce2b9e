from blogcms.schemas.profile_schema import ProfileSchema
from blogcms.services import profile_service
from blogcms.utils.http import ok, error, json_body, validate_schema


def _load():
    return validate_schema(ProfileSchema, json_body())


def get_profile_handler():
    return ok(profile_service.get_profile())


def list_profiles_handler():
    return ok(profile_service.list_profiles())


def create_profile_handler():
    data, errors = _load()
    if errors:
        return error("VALIDATION_ERROR", "Invalid profile data", 400, details=errors)
    return ok(profile_service.create_profile(data), 201)


def update_profile_handler():
    data, errors = _load()
    if errors:
        return error("VALIDATION_ERROR", "Invalid profile data", 400, details=errors)
    return ok(profile_service.update_profile(data))


def update_profile_by_id_handler(profile_id: int):
    data, errors = _load()
    if errors:
        return error("VALIDATION_ERROR", "Invalid profile data", 400, details=errors)
    return ok(profile_service.update_profile_by_id(profile_id, data))


def delete_profile_handler(profile_id: int):
    return ok(profile_service.delete_profile(profile_id))
