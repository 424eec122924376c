from marshmallow import EXCLUDE, fields

from contriboard.extensions import ma

class StatsQuerySchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    start_date = fields.Date(data_key="startDate", load_default=None)
    end_date = fields.Date(data_key="endDate", load_default=None)
