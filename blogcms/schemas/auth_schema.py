from marshmallow import Schema, fields, validate, pre_load, EXCLUDE


class RegisterSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    username = fields.Str(required=True, validate=validate.Length(min=3, max=50))
    email = fields.Email(required=True)
    password = fields.Str(required=True, validate=validate.Length(min=6))
    confirm_password = fields.Str(required=True, data_key="confirmPassword")

    @pre_load
    def strip_identity(self, data, **kwargs):
        # length rules apply to the stored value
        data = dict(data)
        for key in ("username", "email"):
            if isinstance(data.get(key), str):
                data[key] = data[key].strip()
        return data


class LoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    username = fields.Str(required=True, validate=validate.Length(min=1))
    password = fields.Str(required=True, validate=validate.Length(min=1))
