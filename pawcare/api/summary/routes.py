# pawcare/api/summary/routes.py
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity
from marshmallow import ValidationError

from pawcare.core.errors import PawCareError
from pawcare.models.summary import TimeRange
from .schemas import SummaryQuerySchema, PetOverviewResponseSchema

# /api/pets 아래에 등록됩니다.
summary_bp = Blueprint('summary_bp', __name__)

@summary_bp.route('/<string:pet_id>/summary', methods=['GET'])
@jwt_required()
def get_pet_summary(pet_id: str):
    """
    [소유자 전용] 홈 화면 지표 조회.
    최근 체중, 직전 대비 체중 변화, 다음 접종 예정일, 기간(time_range)별 기록 집계를 반환합니다.
    """
    user_id = get_jwt_identity()
    try:
        params = SummaryQuerySchema().load(request.args)
        current_app.services['pets'].get_pet_for_owner(pet_id, user_id)
        overview = current_app.services['summary'].pet_overview(pet_id, TimeRange(params['time_range']))
        return jsonify(PetOverviewResponseSchema().dump(overview)), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except PermissionError as e:
        return jsonify({"error_code": "FORBIDDEN", "message": str(e)}), 403
