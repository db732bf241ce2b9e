from marshmallow import Schema, fields, validate, EXCLUDE


class ProjectSchema(Schema):
    """Body of POST /projects; PATCH loads it with ``partial=True``."""

    class Meta:
        unknown = EXCLUDE

    title = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    description = fields.Str(required=True, validate=validate.Length(min=1))
    image_url = fields.Str(allow_none=True, data_key="imageUrl")
    project_url = fields.Str(allow_none=True, data_key="projectUrl")
    github_url = fields.Str(allow_none=True, data_key="githubUrl")
    tech_stack = fields.Str(allow_none=True, data_key="techStack")
    featured = fields.Bool()
