# pawcare/api/illnesses/schemas.py
from marshmallow import Schema, fields, validate
from pawcare.models.health_record import Severity
from pawcare.models.illness import Commonality, IllnessCategory

class SymptomSchema(Schema):
    symptom_id = fields.Str()
    name = fields.Str(required=True, validate=validate.Length(min=1))
    commonality = fields.Str(load_default=Commonality.COMMON.value,
                             validate=validate.OneOf([e.value for e in Commonality]))
    typical_severity = fields.Str(load_default=Severity.MILD.value,
                                  validate=validate.OneOf([e.value for e in Severity]))

class CustomIllnessSchema(Schema):
    """POST/PUT /api/illnesses 사용자 정의 질병 요청 스키마."""
    name = fields.Str(required=True, validate=validate.Length(max=80))
    category = fields.Str(required=True, validate=validate.OneOf([e.value for e in IllnessCategory]))
    description = fields.Str(load_default="")
    icon = fields.Str(allow_none=True)
    symptoms = fields.List(fields.Nested(SymptomSchema), load_default=list)
    aliases = fields.List(fields.Str(), load_default=list)
    contagious = fields.Bool(load_default=False)
    emergency_warning = fields.Bool(load_default=False)
    home_care_tips = fields.Str(allow_none=True)

class IllnessQuerySchema(Schema):
    category = fields.Str(validate=validate.OneOf([e.value for e in IllnessCategory]))

class IllnessResponseSchema(Schema):
    illness_id = fields.Str(dump_only=True)
    name = fields.Str()
    category = fields.Str()
    description = fields.Str()
    icon = fields.Str(allow_none=True)
    is_predefined = fields.Bool()
    symptoms = fields.List(fields.Nested(SymptomSchema))
    aliases = fields.List(fields.Str())
    contagious = fields.Bool()
    emergency_warning = fields.Bool()
    home_care_tips = fields.Str(allow_none=True)
