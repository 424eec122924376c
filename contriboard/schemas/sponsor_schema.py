from marshmallow import fields

from contriboard.extensions import ma

class SponsorPublicSchema(ma.Schema):
    id = fields.String()
    company_name = fields.String(allow_none=True)
    description = fields.String(allow_none=True)
    website_url = fields.String(allow_none=True)
    favicon_url = fields.String(allow_none=True)
