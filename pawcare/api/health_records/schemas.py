# pawcare/api/health_records/schemas.py
from datetime import timezone
from marshmallow import Schema, fields, validate, validates_schema, ValidationError, pre_load
from pawcare.models.health_record import FileType, RecordType, Severity

# 조회 기간 필터의 상한 (약 100년)
MAX_WINDOW_DAYS = 36500

class AttachmentSchema(Schema):
    attachment_id = fields.Str()
    file_name = fields.Str(required=True, validate=validate.Length(min=1))
    file_type = fields.Str(required=True, validate=validate.OneOf([e.value for e in FileType]))
    file_path = fields.Str(required=True)
    size = fields.Int(allow_none=True, validate=validate.Range(min=0))
    uploaded_at = fields.DateTime(allow_none=True)

class HealthRecordCreateSchema(Schema):
    """
    POST /api/health-records 요청 본문 스키마. PUT에서도 동일하게 사용합니다.
    """
    pet_id = fields.Str(required=True)
    title = fields.Str(required=True, validate=validate.Length(max=120))
    description = fields.Str(load_default="")
    timestamp = fields.AwareDateTime(required=True, default_timezone=timezone.utc)
    record_type = fields.Str(load_default=RecordType.SYMPTOM.value,
                             validate=validate.OneOf([e.value for e in RecordType]))
    severity = fields.Str(load_default=Severity.MILD.value,
                          validate=validate.OneOf([e.value for e in Severity]))
    illness_id = fields.Str(allow_none=True)
    veterinarian = fields.Str(allow_none=True)
    notes = fields.Str(allow_none=True)
    reminder_date = fields.AwareDateTime(allow_none=True, default_timezone=timezone.utc)
    attachments = fields.List(fields.Nested(AttachmentSchema), load_default=list)

    @validates_schema
    def validate_reminder(self, data, **kwargs):
        """알림일은 기록 시각 이후여야 합니다."""
        reminder = data.get('reminder_date')
        timestamp = data.get('timestamp')
        if reminder and timestamp and reminder < timestamp:
            raise ValidationError('알림일은 기록 시각보다 이후여야 합니다.', 'reminder_date')

class HealthRecordQuerySchema(Schema):
    """
    GET /api/health-records 쿼리 파라미터 검증 스키마.
    """
    pet_id = fields.Str(required=True)
    record_type = fields.Str(validate=validate.OneOf([e.value for e in RecordType]))
    severity = fields.Str(validate=validate.OneOf([e.value for e in Severity]))
    within_days = fields.Int(validate=validate.Range(min=0, max=MAX_WINDOW_DAYS))
    q = fields.Str()
    sort = fields.Str(validate=validate.OneOf(['store', 'timestamp_desc']), load_default='timestamp_desc')

    @pre_load
    def preprocess_data(self, data, **kwargs):
        """빈 문자열 파라미터는 전달되지 않은 것으로 취급합니다."""
        return {k: v for k, v in data.items() if v != ''}

class AttachmentResponseSchema(Schema):
    attachment_id = fields.Str()
    file_name = fields.Str()
    file_type = fields.Str()
    file_path = fields.Str()
    size = fields.Int(allow_none=True)
    uploaded_at = fields.DateTime()

class HealthRecordResponseSchema(Schema):
    record_id = fields.Str(dump_only=True)
    pet_id = fields.Str()
    title = fields.Str()
    description = fields.Str()
    timestamp = fields.DateTime()
    record_type = fields.Str()
    severity = fields.Str()
    illness_id = fields.Str(allow_none=True)
    veterinarian = fields.Str(allow_none=True)
    notes = fields.Str(allow_none=True)
    reminder_date = fields.DateTime(allow_none=True)
    attachments = fields.List(fields.Nested(AttachmentResponseSchema))

class HealthRecordsResponseSchema(Schema):
    records = fields.List(fields.Nested(HealthRecordResponseSchema), dump_default=[])
    meta = fields.Dict(dump_default={})
