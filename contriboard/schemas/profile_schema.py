from marshmallow import RAISE, fields, pre_load, validate

from contriboard.extensions import ma

class ProfileUpdateSchema(ma.Schema):
    class Meta:
        unknown = RAISE

    display_username = fields.String(allow_none=True, validate=validate.Length(max=255))
    website_url = fields.Url(allow_none=True)
    other_urls = fields.List(fields.Url(), allow_none=True)

    @pre_load
    def blank_website_is_none(self, data, **kwargs):
        if isinstance(data, dict) and data.get("website_url") == "":
            data = dict(data, website_url=None)
        return data

class ContributionSyncSchema(ma.Schema):
    class Meta:
        unknown = RAISE

    github_username = fields.String(required=True, validate=validate.Length(min=1, max=255))
    github_id = fields.String(allow_none=True, load_default=None)
    avatar_url = fields.Url(allow_none=True, load_default=None)
    contributions = fields.Dict(
        keys=fields.String(),
        values=fields.Integer(allow_none=True, validate=validate.Range(min=0)),
        required=True,
    )
