# pawcare/core/config.py

import os # 환경 변수를 읽기 위해 사용합니다.


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    return float(value) if value not in (None, '') else default


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # 시뮬레이션 세션 토큰(JWT)의 서명에 사용됩니다. 운영 환경에서는 반드시 .env로 주입합니다.
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'pawcare-dev-secret-change-me-32bytes!')

    # 모든 변경(추가/수정/삭제) 요청에 적용되는 인위적 지연 시간(초). 실제 백엔드 호출을 흉내냅니다.
    SIMULATED_LATENCY = _env_float('PAWCARE_SIMULATED_LATENCY', 0.1)
    # 인증 요청(로그인, OTP 등)에 적용되는 지연 시간(초).
    AUTH_LATENCY = _env_float('PAWCARE_AUTH_LATENCY', 0.4)

    # 앱 시작 시 샘플 데이터로 저장소를 채울지 여부
    SEED_SAMPLE_DATA = _env_bool('PAWCARE_SEED_SAMPLE_DATA', True)


class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True


class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    # 테스트에서는 지연 없이 즉시 처리합니다.
    SIMULATED_LATENCY = 0.0
    AUTH_LATENCY = 0.0


class ProductionConfig(Config):
    """운영 환경 설정 클래스입니다."""
    DEBUG = False


# create_app에서 FLASK_ENV 값에 따라 설정 클래스를 선택하는 데 사용합니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
