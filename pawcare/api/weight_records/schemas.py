# pawcare/api/weight_records/schemas.py
from datetime import timezone
from marshmallow import Schema, fields, validate
from pawcare.models.weight_record import MIN_WEIGHT_KG, MAX_WEIGHT_KG

class WeightRecordCreateSchema(Schema):
    """POST/PUT /api/weight-records 요청 스키마."""
    pet_id = fields.Str(required=True)
    weight = fields.Float(required=True, validate=validate.Range(
        min=MIN_WEIGHT_KG, max=MAX_WEIGHT_KG,
        error=f"체중은 {MIN_WEIGHT_KG}kg 이상 {MAX_WEIGHT_KG}kg 이하여야 합니다."))
    date = fields.AwareDateTime(required=True, default_timezone=timezone.utc)
    notes = fields.Str(required=False, allow_none=True)

class WeightRecordQuerySchema(Schema):
    pet_id = fields.Str(required=True)

class WeightRecordResponseSchema(Schema):
    record_id = fields.Str(dump_only=True)
    pet_id = fields.Str()
    weight = fields.Float()
    date = fields.DateTime()
    notes = fields.Str(allow_none=True)
