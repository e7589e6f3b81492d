# pawcare/api/health_records/routes.py
import logging
import uuid
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from pawcare.core.errors import NotFoundError, PawCareError
from pawcare.models.health_record import HealthRecord, RecordType, Severity
from pawcare.api.health_records.schemas import (
    HealthRecordCreateSchema,
    HealthRecordQuerySchema,
    HealthRecordResponseSchema,
    HealthRecordsResponseSchema
)

health_records_bp = Blueprint('health_records_bp', __name__)

def _owned_record(record_id: str, user_id: str) -> HealthRecord:
    """기록을 조회하고, 해당 반려동물의 소유자인지 확인합니다."""
    record = current_app.services['health_records'].get_record(record_id)
    if record is None:
        raise NotFoundError("해당 ID의 건강 기록을 찾을 수 없습니다.")
    current_app.services['pets'].get_pet_for_owner(record.pet_id, user_id)
    return record

@health_records_bp.route('', methods=['GET'])
@jwt_required()
def get_records():
    """
    반려동물별 건강 기록 조회 API.

    쿼리 파라미터:
    - pet_id: 반려동물 ID (필수)
    - record_type: vaccination, medication, vet_visit, symptom
    - severity: mild, moderate, severe
    - within_days: 최근 N일 이내 기록만
    - q: 제목/설명/메모/수의사 검색어
    - sort: store(저장 순서) 또는 timestamp_desc(기본값)
    """
    user_id = get_jwt_identity()
    service = current_app.services['health_records']
    try:
        params = HealthRecordQuerySchema().load(request.args)
        current_app.services['pets'].get_pet_for_owner(params['pet_id'], user_id)

        filters = dict(
            record_type=RecordType(params['record_type']) if params.get('record_type') else None,
            severity=Severity(params['severity']) if params.get('severity') else None,
            within_last_days=params.get('within_days'),
            search=params.get('q'),
        )
        if params['sort'] == 'store':
            records = service.records_for_pet(params['pet_id'], **filters)
        else:
            records = service.records_sorted_by_date(params['pet_id'], **filters)

        result = {
            'records': [r.to_dict() for r in records],
            'meta': {'pet_id': params['pet_id'], 'total_count': len(records), 'sort': params['sort']},
        }
        return jsonify(HealthRecordsResponseSchema().dump(result)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except Exception as e:
        logging.error(f"Health record retrieval API error: {e}", exc_info=True)
        return jsonify({"error_code": "FETCH_FAILED", "message": "기록 조회 중 오류가 발생했습니다."}), 500

@health_records_bp.route('', methods=['POST'])
@jwt_required()
async def create_record():
    """건강 기록 생성 API 엔드포인트."""
    user_id = get_jwt_identity()
    service = current_app.services['health_records']
    try:
        validated_data = HealthRecordCreateSchema().load(request.get_json(silent=True))
        current_app.services['pets'].get_pet_for_owner(validated_data['pet_id'], user_id)
        record = HealthRecord.from_dict({**validated_data, 'record_id': str(uuid.uuid4())})
        created = await service.add_health_record(record)
        return jsonify(HealthRecordResponseSchema().dump(created.to_dict())), 201
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except Exception as e:
        logging.error(f"Health record creation API error: {e}", exc_info=True)
        return jsonify({"error_code": "RECORD_CREATION_FAILED", "message": "기록 생성 중 오류 발생"}), 500

@health_records_bp.route('/<string:record_id>', methods=['PUT'])
@jwt_required()
async def update_record(record_id: str):
    user_id = get_jwt_identity()
    service = current_app.services['health_records']
    try:
        existing = _owned_record(record_id, user_id)
        validated_data = HealthRecordCreateSchema().load(request.get_json(silent=True))
        if validated_data['pet_id'] != existing.pet_id:
            current_app.services['pets'].get_pet_for_owner(validated_data['pet_id'], user_id)
        record = HealthRecord.from_dict({**validated_data, 'record_id': record_id})
        updated = await service.update_health_record(record)
        return jsonify(HealthRecordResponseSchema().dump(updated.to_dict())), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except Exception as e:
        logging.error(f"Health record update API error (record_id: {record_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "기록 수정 중 오류가 발생했습니다."}), 500

@health_records_bp.route('/<string:record_id>', methods=['DELETE'])
@jwt_required()
async def delete_record(record_id: str):
    user_id = get_jwt_identity()
    service = current_app.services['health_records']
    try:
        _owned_record(record_id, user_id)
        await service.delete_health_record(record_id)
        return '', 204
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
    except Exception as e:
        logging.error(f"Health record delete API error (record_id: {record_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "기록 삭제 중 오류가 발생했습니다."}), 500
