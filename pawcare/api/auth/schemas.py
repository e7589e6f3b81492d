# pawcare/api/auth/schemas.py
from marshmallow import Schema, fields, validate
from pawcare.models.user import Language

# 이메일/비밀번호/OTP 형식 규칙은 AuthService에서 검증하고, 여기서는 필수 여부만 확인합니다.

class LoginSchema(Schema):
    """이메일/비밀번호 로그인 요청 스키마"""
    email = fields.Str(required=True)
    password = fields.Str(required=True, load_only=True)

class RegisterSchema(Schema):
    """회원가입 요청 스키마"""
    full_name = fields.Str(required=True)
    email = fields.Str(required=True)
    password = fields.Str(required=True, load_only=True)
    confirm_password = fields.Str(required=True, load_only=True)

class EmailSchema(Schema):
    """OTP 발송 / 비밀번호 재설정 요청 스키마"""
    email = fields.Str(required=True)

class OtpLoginSchema(Schema):
    email = fields.Str(required=True)
    otp = fields.Str(required=True)

class LanguageUpdateSchema(Schema):
    language = fields.Str(required=True, validate=validate.OneOf([e.value for e in Language]))

class UserResponseSchema(Schema):
    user_id = fields.Str()
    email = fields.Str()
    full_name = fields.Str(allow_none=True)
    language = fields.Str()
    created_at = fields.DateTime()

class LogoutRequestSchema(Schema):
    """로그아웃 요청 스키마. Access 토큰은 헤더로 받고, Refresh 토큰은 선택적으로 본문에 담습니다."""
    refresh_token = fields.Str(load_default=None, allow_none=True)
