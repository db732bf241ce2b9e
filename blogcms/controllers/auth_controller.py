from blogcms.schemas.auth_schema import RegisterSchema, LoginSchema
from blogcms.services import auth_service
from blogcms.utils.http import ok, error, json_body, validate_schema


def register_handler():
    data, errors = validate_schema(RegisterSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "Invalid registration data", 400, details=errors)

    user = auth_service.register(
        username=data["username"],
        email=data["email"],
        password=data["password"],
        confirm_password=data["confirm_password"],
    )
    return ok(user, 201)


def login_handler():
    data, errors = validate_schema(LoginSchema, json_body())
    if errors:
        return error("VALIDATION_ERROR", "username and password required", 400, details=errors)

    return ok(auth_service.login(data["username"], data["password"]))


def logout_handler():
    """
    Tokens are stateless JWTs; the client drops its copy. This endpoint only
    confirms the logout.
    """
    return ok({"message": "Logged out successfully"})
