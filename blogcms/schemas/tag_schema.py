from marshmallow import Schema, fields, validate, EXCLUDE


class TagSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=50))
    color = fields.Str(allow_none=True, validate=validate.Length(max=20))
