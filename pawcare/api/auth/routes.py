# pawcare/api/auth/routes.py

import logging
import jwt
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    jwt_required,
    get_jwt_identity,
    get_jwt,
    decode_token
)
from marshmallow import ValidationError

from pawcare.core.errors import PawCareError
from pawcare.models.user import Language, User
from .schemas import (
    LoginSchema,
    RegisterSchema,
    EmailSchema,
    OtpLoginSchema,
    LanguageUpdateSchema,
    LogoutRequestSchema,
    UserResponseSchema
)

auth_bp = Blueprint('auth_bp', __name__)

def _session_response(user: User, status: int = 200):
    """로그인/회원가입 성공 시 세션 토큰과 사용자 정보를 함께 반환합니다."""
    identity = user.user_id
    return jsonify({
        "token": create_access_token(identity=identity),
        "refresh_token": create_refresh_token(identity=identity),
        "user": UserResponseSchema().dump(user.to_dict())
    }), status

@auth_bp.route('/login', methods=['POST'])
async def login():
    """이메일/비밀번호 로그인. 형식만 검사하며, 처음 보는 이메일이면 사용자를 생성합니다."""
    auth_service = current_app.services['auth']
    try:
        data = LoginSchema().load(request.get_json(silent=True))
        user = await auth_service.login_with_password(data['email'], data['password'])
        return _session_response(user)
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"로그인 중 예외 발생: {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "서버 내부 오류가 발생했습니다."}), 500

@auth_bp.route('/register', methods=['POST'])
async def register():
    auth_service = current_app.services['auth']
    try:
        data = RegisterSchema().load(request.get_json(silent=True))
        user = await auth_service.register(data['full_name'], data['email'],
                                           data['password'], data['confirm_password'])
        return _session_response(user, 201)
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"회원가입 중 예외 발생: {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "서버 내부 오류가 발생했습니다."}), 500

@auth_bp.route('/otp', methods=['POST'])
async def send_otp():
    """OTP 발송 요청 (시뮬레이션: 실제로 메일을 보내지 않습니다)."""
    auth_service = current_app.services['auth']
    try:
        data = EmailSchema().load(request.get_json(silent=True))
        await auth_service.send_otp(data['email'])
        return jsonify({"message": "인증 코드가 발송되었습니다."}), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code

@auth_bp.route('/otp/verify', methods=['POST'])
async def verify_otp():
    auth_service = current_app.services['auth']
    try:
        data = OtpLoginSchema().load(request.get_json(silent=True))
        user = await auth_service.login_with_otp(data['email'], data['otp'])
        return _session_response(user)
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code

@auth_bp.route('/reset-password', methods=['POST'])
async def reset_password():
    auth_service = current_app.services['auth']
    try:
        data = EmailSchema().load(request.get_json(silent=True))
        await auth_service.reset_password(data['email'])
        return jsonify({"message": "비밀번호 재설정 안내가 발송되었습니다."}), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code


# --- 토큰 재발급 엔드포인트 ---
@auth_bp.route('/token/refresh', methods=['POST'])
@jwt_required(refresh=True) # Refresh Token만 허용하는 데코레이터
def refresh_token():
    """유효한 Refresh Token으로 새로운 Access Token을 발급합니다."""
    current_user_id = get_jwt_identity()
    new_access_token = create_access_token(identity=current_user_id)
    return jsonify(token=new_access_token), 200


# --- 로그아웃 엔드포인트 ---
@auth_bp.route('/logout', methods=['POST'])
@jwt_required()
def logout():
    """로그아웃. 현재 Access 토큰과 (본문에 있다면) Refresh 토큰을 무효화 목록에 추가합니다."""
    auth_service = current_app.services['auth']
    try:
        data = LogoutRequestSchema().load(request.get_json(silent=True) or {})
        refresh_jti = None
        if data.get('refresh_token'):
            # 만료된 Refresh 토큰도 무효화할 수 있도록 만료 검사를 생략합니다.
            decoded_refresh = decode_token(data['refresh_token'], allow_expired=True)
            if decoded_refresh.get('type') != 'refresh' or decoded_refresh.get('sub') != get_jwt_identity():
                return jsonify({"error_code": "INVALID_TOKEN", "message": "유효하지 않은 토큰입니다."}), 422
            refresh_jti = decoded_refresh['jti']

        auth_service.logout_user(get_jwt()['jti'], refresh_jti)
        return jsonify({"message": "로그아웃 되었습니다."}), 200

    except ValidationError as e:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": e.messages}), 400
    except jwt.PyJWTError as e:
        logging.error(f"JWT 해독 오류 발생: {e}", exc_info=True)
        return jsonify({"error_code": "INVALID_TOKEN", "message": "유효하지 않은 토큰입니다."}), 422


@auth_bp.route('/me', methods=['GET'])
@jwt_required()
def get_me():
    auth_service = current_app.services['auth']
    try:
        user = auth_service.get_user(get_jwt_identity())
        return jsonify(UserResponseSchema().dump(user.to_dict())), 200
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code

@auth_bp.route('/me/language', methods=['PATCH'])
@jwt_required()
async def update_language():
    """앱 표시 언어 변경 (en, zh-Hans, zh-Hant)."""
    auth_service = current_app.services['auth']
    try:
        data = LanguageUpdateSchema().load(request.get_json(silent=True))
        user = await auth_service.update_language(get_jwt_identity(), Language(data['language']))
        return jsonify(UserResponseSchema().dump(user.to_dict())), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PawCareError as e:
        return jsonify(e.to_dict()), e.status_code
