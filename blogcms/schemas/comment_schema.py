from marshmallow import Schema, fields, validate, EXCLUDE
from blogcms.utils.enums import CommentStatus


class CommentCreateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    content = fields.Str(required=True, validate=validate.Length(min=1))
    article_id = fields.Int(required=True, data_key="articleId")
    author = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    email = fields.Email(required=True)
    website = fields.Str(allow_none=True)


class CommentUpdateSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    content = fields.Str(validate=validate.Length(min=1))
    status = fields.Str(validate=validate.OneOf([e.value for e in CommentStatus]))
