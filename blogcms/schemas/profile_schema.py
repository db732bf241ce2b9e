from marshmallow import Schema, fields, validate, validates, EXCLUDE


class ProfileSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    title = fields.Str(allow_none=True)
    avatar = fields.Str(allow_none=True)
    bio = fields.Str(allow_none=True)
    github = fields.Str(allow_none=True)
    twitter = fields.Str(allow_none=True)
    linkedin = fields.Str(allow_none=True)
    email = fields.Str(allow_none=True)
    phone = fields.Str(allow_none=True)
    location = fields.Str(allow_none=True)

    @validates("email")
    def validate_email(self, value, **kwargs):
        # empty string clears the address
        if value:
            validate.Email()(value)
