# pawcare/api/pets/schemas.py
from marshmallow import Schema, fields, validate
from pawcare.models.pet import PetGender, Species

class PetRegistrationSchema(Schema):
    """POST /api/pets 반려동물 등록 요청 스키마. PUT(전체 수정)에도 그대로 사용합니다."""
    # 공백만 있는 이름은 서비스 계층에서 검증합니다.
    name = fields.Str(required=True, validate=validate.Length(max=40))
    species = fields.Str(load_default=Species.CAT.value, validate=validate.OneOf([e.value for e in Species]))
    breed = fields.Str(required=True, validate=validate.Length(min=1, max=60))
    birth_date = fields.Date(required=True, format="%Y-%m-%d")
    gender = fields.Str(required=True, validate=validate.OneOf([e.value for e in PetGender]))
    is_neutered = fields.Bool(load_default=False)
    allergens = fields.List(fields.Str(), load_default=list)
    chronic_conditions = fields.List(fields.Str(), load_default=list)
    blood_type = fields.Str(required=False, allow_none=True)
    image_url = fields.URL(required=False, allow_none=True)

class BreedQuerySchema(Schema):
    """GET /api/pets/breeds 쿼리 파라미터 스키마."""
    species = fields.Str(load_default=Species.CAT.value, validate=validate.OneOf([e.value for e in Species]))

class PetProfileResponseSchema(Schema):
    """소유자 전용 프로필 정보 응답 스키마."""
    pet_id = fields.Str(dump_only=True)
    owner_id = fields.Str(dump_only=True)
    name = fields.Str()
    species = fields.Str()
    breed = fields.Str()
    birth_date = fields.Date()
    age = fields.Int()
    age_months = fields.Int()
    gender = fields.Str()
    is_neutered = fields.Bool()
    allergens = fields.List(fields.Str())
    chronic_conditions = fields.List(fields.Str())
    blood_type = fields.Str(allow_none=True)
    image_url = fields.Str(allow_none=True)
    created_at = fields.DateTime()

class PetDeletionResponseSchema(Schema):
    pet_id = fields.Str()
    deleted_health_records = fields.Int()
    deleted_weight_records = fields.Int()
