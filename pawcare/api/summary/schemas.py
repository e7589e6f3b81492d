# pawcare/api/summary/schemas.py
from marshmallow import Schema, fields, validate
from pawcare.api.weight_records.schemas import WeightRecordResponseSchema
from pawcare.models.summary import TimeRange

class SummaryQuerySchema(Schema):
    """GET /api/pets/<pet_id>/summary 쿼리 파라미터 스키마."""
    time_range = fields.Str(load_default=TimeRange.MONTHLY.value,
                            validate=validate.OneOf([e.value for e in TimeRange]))

class HealthSummarySchema(Schema):
    pet_id = fields.Str()
    time_range = fields.Str()
    days = fields.Int()
    total_records = fields.Int()
    by_record_type = fields.Dict(keys=fields.Str(), values=fields.Int())
    by_severity = fields.Dict(keys=fields.Str(), values=fields.Int())

class PetOverviewResponseSchema(Schema):
    pet_id = fields.Str()
    latest_weight = fields.Nested(WeightRecordResponseSchema, allow_none=True)
    weight_delta = fields.Float(allow_none=True)
    next_vaccination_due = fields.DateTime(allow_none=True)
    health_summary = fields.Nested(HealthSummarySchema)
