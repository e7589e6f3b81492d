# pawcare/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from flask import Flask, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException
from flask_jwt_extended import JWTManager

# - 설정 / 예외
from pawcare.core.config import config_by_name
from pawcare.core.errors import PawCareError

# - 저장소
from pawcare.store.entity_store import StoreChange
from pawcare.store.seed import create_stores, load_sample_data, predefined_illnesses

# - API 블루프린트
from pawcare.api.auth.routes import auth_bp
from pawcare.api.pets.routes import pets_bp
from pawcare.api.health_records.routes import health_records_bp
from pawcare.api.weight_records.routes import weight_records_bp
from pawcare.api.illnesses.routes import illnesses_bp
from pawcare.api.summary.routes import summary_bp
from pawcare.api.meta_routes import meta_bp

# - 서비스 모듈
from pawcare.api.auth.services import AuthService
from pawcare.api.pets.services import PetService
from pawcare.api.health_records.services import HealthRecordService
from pawcare.api.weight_records.services import WeightRecordService
from pawcare.api.illnesses.services import IllnessService
from pawcare.api.summary.services import SummaryService


def _log_store_change(change: StoreChange) -> None:
    logging.debug(f"[store:{change.store}] {change.action.value} {list(change.entity_ids)}")


def create_app(config_name=None):
    """
    Flask 애플리케이션 팩토리 함수.
    앱마다 저장소를 새로 만들고 서비스에 주입하므로, 모듈 수준의 전역 저장소는 없습니다.
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')
    if config_name not in config_by_name:
        raise ValueError(f"알 수 없는 설정 이름입니다: {config_name}")

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 확장 기능 초기화
    # =====================================================================================
    jwt_manager = JWTManager(app)

    # =====================================================================================
    # 5. 저장소 생성 및 샘플 데이터 적재
    # =====================================================================================
    stores = create_stores()
    for store in stores.all():
        store.subscribe(_log_store_change)

    if app.config['SEED_SAMPLE_DATA']:
        load_sample_data(stores)
        logging.info("Stores seeded with sample data")

    # =====================================================================================
    # 6. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    latency = app.config['SIMULATED_LATENCY']
    app.services = {}

    # 6-1. 저장소만 주입받는 도메인 서비스
    app.services['auth'] = AuthService(stores.users, latency=app.config['AUTH_LATENCY'])
    app.services['pets'] = PetService(
        pet_store=stores.pets,
        health_record_store=stores.health_records,
        weight_record_store=stores.weight_records,
        latency=latency
    )
    app.services['health_records'] = HealthRecordService(stores.health_records, latency=latency)
    app.services['weight_records'] = WeightRecordService(stores.weight_records, latency=latency)
    app.services['illnesses'] = IllnessService(
        stores.custom_illnesses,
        predefined=predefined_illnesses(),
        latency=latency
    )

    # 6-2. 다른 서비스를 주입받아야 하는 서비스
    app.services['summary'] = SummaryService(
        health_record_service=app.services['health_records'],
        weight_record_service=app.services['weight_records']
    )
    app.stores = stores

    # 로그아웃된 토큰은 인증 서비스의 Blocklist로 확인합니다.
    @jwt_manager.token_in_blocklist_loader
    def check_if_token_revoked(jwt_header, jwt_payload):
        return app.services['auth'].is_token_revoked(jwt_payload)

    # =====================================================================================
    # 7. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(pets_bp, url_prefix='/api/pets')
    app.register_blueprint(summary_bp, url_prefix='/api/pets')
    app.register_blueprint(health_records_bp, url_prefix='/api/health-records')
    app.register_blueprint(weight_records_bp, url_prefix='/api/weight-records')
    app.register_blueprint(illnesses_bp, url_prefix='/api/illnesses')
    app.register_blueprint(meta_bp, url_prefix='/api/meta')

    # =====================================================================================
    # 8. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error_code": "VALIDATION_ERROR", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(PawCareError)
    def handle_domain_error(err):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(PermissionError)
    def handle_permission_error(err):
        return jsonify({"error_code": "FORBIDDEN", "message": str(err)}), 403

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # HTTP 예외(404 라우트 없음, 405 등)는 Flask 기본 응답을 유지합니다.
        if isinstance(err, HTTPException):
            return err
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"error_code": "INTERNAL_SERVER_ERROR", "message": "서버 내부에서 예상치 못한 오류가 발생했습니다."}
        return jsonify(response), 500

    # =====================================================================================
    # 9. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
