# pawcare/api/weight_records/routes.py
import logging
import uuid
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from pawcare.core.errors import NotFoundError, PawCareError
from pawcare.models.weight_record import WeightRecord
from pawcare.api.weight_records.schemas import (
    WeightRecordCreateSchema,
    WeightRecordQuerySchema,
    WeightRecordResponseSchema
)

weight_records_bp = Blueprint('weight_records_bp', __name__)

def _owned_record(record_id: str, user_id: str) -> WeightRecord:
    record = current_app.services['weight_records'].get_record(record_id)
    if record is None:
        raise NotFoundError("해당 ID의 체중 기록을 찾을 수 없습니다.")
    current_app.services['pets'].get_pet_for_owner(record.pet_id, user_id)
    return record

@weight_records_bp.route('', methods=['GET'])
@jwt_required()
def get_weight_history():
    """반려동물의 체중 기록을 최신순으로 조회합니다."""
    user_id = get_jwt_identity()
    service = current_app.services['weight_records']
    try:
        params = WeightRecordQuerySchema().load(request.args)
        current_app.services['pets'].get_pet_for_owner(params['pet_id'], user_id)
        records = service.weight_records_for_pet(params['pet_id'])
        return jsonify(WeightRecordResponseSchema(many=True).dump([r.to_dict() for r in records])), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403

@weight_records_bp.route('', methods=['POST'])
@jwt_required()
async def create_weight_record():
    user_id = get_jwt_identity()
    service = current_app.services['weight_records']
    try:
        validated_data = WeightRecordCreateSchema().load(request.get_json(silent=True))
        current_app.services['pets'].get_pet_for_owner(validated_data['pet_id'], user_id)
        record = WeightRecord.from_dict({**validated_data, 'record_id': str(uuid.uuid4())})
        created = await service.add_weight_record(record)
        return jsonify(WeightRecordResponseSchema().dump(created.to_dict())), 201
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except Exception as e:
        logging.error(f"Weight record creation API error: {e}", exc_info=True)
        return jsonify({"error_code": "RECORD_CREATION_FAILED", "message": "체중 기록 생성 중 오류 발생"}), 500

@weight_records_bp.route('/<string:record_id>', methods=['PUT'])
@jwt_required()
async def update_weight_record(record_id: str):
    user_id = get_jwt_identity()
    service = current_app.services['weight_records']
    try:
        existing = _owned_record(record_id, user_id)
        validated_data = WeightRecordCreateSchema().load(request.get_json(silent=True))
        if validated_data['pet_id'] != existing.pet_id:
            current_app.services['pets'].get_pet_for_owner(validated_data['pet_id'], user_id)
        record = WeightRecord.from_dict({**validated_data, 'record_id': record_id})
        updated = await service.update_weight_record(record)
        return jsonify(WeightRecordResponseSchema().dump(updated.to_dict())), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except Exception as e:
        logging.error(f"Weight record update API error (record_id: {record_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "체중 기록 수정 중 오류가 발생했습니다."}), 500

@weight_records_bp.route('/<string:record_id>', methods=['DELETE'])
@jwt_required()
async def delete_weight_record(record_id: str):
    user_id = get_jwt_identity()
    service = current_app.services['weight_records']
    try:
        _owned_record(record_id, user_id)
        await service.delete_weight_record(record_id)
        return '', 204
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
