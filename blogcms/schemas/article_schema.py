from marshmallow import Schema, fields, validate, EXCLUDE
from blogcms.utils.enums import ArticleStatus


class ArticleSchema(Schema):
    """Body of POST /articles; PATCH loads it with ``partial=True``."""

    class Meta:
        unknown = EXCLUDE

    title = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    content = fields.Str(required=True, validate=validate.Length(min=1))
    summary = fields.Str(allow_none=True)
    cover_image = fields.Str(allow_none=True, data_key="coverImage")
    status = fields.Str(validate=validate.OneOf([e.value for e in ArticleStatus]))
    tag_ids = fields.List(fields.Int(), data_key="tagIds")
