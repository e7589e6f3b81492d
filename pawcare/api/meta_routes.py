# pawcare/api/meta_routes.py
from flask import Blueprint, jsonify
from pawcare.presentation import presentation_tables

meta_bp = Blueprint('meta_bp', __name__)

@meta_bp.route('/presentation', methods=['GET'])
def get_presentation_tables():
    """UI 클라이언트용 표시 이름/아이콘/색상 매핑 테이블. 인증이 필요 없습니다."""
    return jsonify(presentation_tables()), 200
