# pawcare/api/illnesses/routes.py
import logging
import uuid
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required
from marshmallow import ValidationError

from pawcare.core.errors import PawCareError
from pawcare.models.illness import Illness, IllnessCategory
from pawcare.presentation import illness_icon
from .schemas import CustomIllnessSchema, IllnessQuerySchema, IllnessResponseSchema

illnesses_bp = Blueprint('illnesses_bp', __name__)

def _dump(illness: Illness) -> dict:
    # 아이콘이 없는 질병은 카테고리 아이콘으로 내려줍니다.
    return IllnessResponseSchema().dump({**illness.to_dict(), 'icon': illness_icon(illness)})

@illnesses_bp.route('', methods=['GET'])
@jwt_required()
def list_illnesses():
    """내장 질병 + 사용자 정의 질병 목록. category 쿼리로 필터링할 수 있습니다."""
    service = current_app.services['illnesses']
    try:
        params = IllnessQuerySchema().load(request.args)
        if params.get('category'):
            illnesses = service.illnesses_by_category(IllnessCategory(params['category']))
        else:
            illnesses = service.get_all()
        return jsonify([_dump(i) for i in illnesses]), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400

@illnesses_bp.route('', methods=['POST'])
@jwt_required()
async def create_custom_illness():
    service = current_app.services['illnesses']
    try:
        validated_data = CustomIllnessSchema().load(request.get_json(silent=True))
        illness = Illness.from_dict({**validated_data, 'illness_id': str(uuid.uuid4())})
        created = await service.add_custom(illness)
        return jsonify(_dump(created)), 201
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Custom illness creation API error: {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "질병 추가 중 오류가 발생했습니다."}), 500

@illnesses_bp.route('/<string:illness_id>', methods=['PUT'])
@jwt_required()
async def update_custom_illness(illness_id: str):
    """사용자 정의 질병만 수정할 수 있습니다. 내장 질병 ID는 404."""
    service = current_app.services['illnesses']
    try:
        validated_data = CustomIllnessSchema().load(request.get_json(silent=True))
        illness = Illness.from_dict({**validated_data, 'illness_id': illness_id})
        updated = await service.update_custom(illness)
        return jsonify(_dump(updated)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Custom illness update API error (illness_id: {illness_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "질병 수정 중 오류가 발생했습니다."}), 500

@illnesses_bp.route('/<string:illness_id>', methods=['DELETE'])
@jwt_required()
async def delete_custom_illness(illness_id: str):
    service = current_app.services['illnesses']
    try:
        await service.delete_custom(illness_id)
        return '', 204
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
