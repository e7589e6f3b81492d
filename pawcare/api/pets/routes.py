# pawcare/api/pets/routes.py
import logging
import uuid
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from pawcare.core.errors import PawCareError
from pawcare.models.pet import Pet, Species, common_breeds
from .schemas import (
    PetRegistrationSchema,
    PetProfileResponseSchema,
    PetDeletionResponseSchema,
    BreedQuerySchema
)

pets_bp = Blueprint('pets_bp', __name__)

@pets_bp.route('', methods=['GET'])
@jwt_required()
def list_pets():
    """로그인한 사용자가 소유한 반려동물 목록을 조회합니다."""
    user_id = get_jwt_identity()
    pet_service = current_app.services['pets']
    pets = pet_service.pets_for_owner(user_id)
    return jsonify(PetProfileResponseSchema(many=True).dump([p.to_dict() for p in pets])), 200

@pets_bp.route('', methods=['POST'])
@jwt_required()
async def register_pet():
    """반려동물 등록 API. ID는 서버에서 발급합니다."""
    user_id = get_jwt_identity()
    pet_service = current_app.services['pets']
    try:
        validated_data = PetRegistrationSchema().load(request.get_json(silent=True))
        new_pet = Pet.from_dict({**validated_data, 'pet_id': str(uuid.uuid4()), 'owner_id': user_id})
        stored = await pet_service.add_pet(new_pet)
        return jsonify(PetProfileResponseSchema().dump(stored.to_dict())), 201
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Pet registration API error: {e}", exc_info=True)
        return jsonify({"error_code": "PET_REGISTRATION_FAILED", "message": "반려동물 등록 중 오류가 발생했습니다."}), 500

@pets_bp.route('/breeds', methods=['GET'])
@jwt_required()
def get_common_breeds():
    """종별 대표 품종 목록 (입력 자동완성용)."""
    try:
        params = BreedQuerySchema().load(request.args)
        return jsonify({"species": params['species'], "breeds": common_breeds(Species(params['species']))}), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400

@pets_bp.route('/<string:pet_id>', methods=['GET'])
@jwt_required()
def get_pet_profile(pet_id: str):
    """[소유자 전용] 특정 반려동물의 프로필 정보를 조회합니다."""
    user_id = get_jwt_identity()
    pet_service = current_app.services['pets']
    try:
        pet = pet_service.get_pet_for_owner(pet_id, user_id)
        return jsonify(PetProfileResponseSchema().dump(pet.to_dict())), 200
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403

@pets_bp.route('/<string:pet_id>', methods=['PUT'])
@jwt_required()
async def update_pet_profile(pet_id: str):
    """[소유자 전용] 반려동물 프로필 전체를 교체합니다 (ID, 소유자, 등록일은 유지)."""
    user_id = get_jwt_identity()
    pet_service = current_app.services['pets']
    try:
        existing = pet_service.get_pet_for_owner(pet_id, user_id)
        validated_data = PetRegistrationSchema().load(request.get_json(silent=True))
        updated = Pet.from_dict({**validated_data, 'pet_id': pet_id, 'owner_id': user_id,
                                 'created_at': existing.created_at})
        stored = await pet_service.update_pet(updated)
        return jsonify(PetProfileResponseSchema().dump(stored.to_dict())), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except Exception as e:
        logging.error(f"Update pet profile API error (pet_id: {pet_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "프로필 수정 중 오류가 발생했습니다."}), 500

@pets_bp.route('/<string:pet_id>', methods=['DELETE'])
@jwt_required()
async def delete_pet(pet_id: str):
    """[소유자 전용] 반려동물과 그 건강/체중 기록을 모두 삭제합니다."""
    user_id = get_jwt_identity()
    pet_service = current_app.services['pets']
    try:
        pet_service.get_pet_for_owner(pet_id, user_id)
        result = await pet_service.delete_pet(pet_id)
        return jsonify(PetDeletionResponseSchema().dump({'pet_id': pet_id, **result})), 200
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except Exception as e:
        logging.error(f"Delete pet API error (pet_id: {pet_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "반려동물 삭제 중 오류가 발생했습니다."}), 500
