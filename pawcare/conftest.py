# pawcare/conftest.py
import pytest

from pawcare import create_app
from pawcare.store.seed import DEMO_USER_EMAIL


@pytest.fixture
def app():
    """테스트마다 샘플 데이터가 새로 적재된 앱 (지연 없음)."""
    app = create_app('testing')
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    """데모 계정(user1)으로 로그인한 Authorization 헤더."""
    response = client.post('/api/auth/login', json={'email': DEMO_USER_EMAIL, 'password': 'password123'})
    assert response.status_code == 200
    return {'Authorization': f"Bearer {response.get_json()['token']}"}
