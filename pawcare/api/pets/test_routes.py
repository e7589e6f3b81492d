# pawcare/api/pets/test_routes.py
from pawcare.store.seed import SAMPLE_PET_ID
from pawcare.utils.datetime_utils import DateTimeUtils

NEW_PET = {
    "name": "Milo",
    "species": "dog",
    "breed": "Shiba Inu",
    "birth_date": DateTimeUtils.to_date_string(DateTimeUtils.years_ago(2)),
    "gender": "male",
    "allergens": ["Beef", " beef "],
}


def test_pets_require_token(client):
    assert client.get('/api/pets').status_code == 401

def test_list_pets_returns_seeded_pet(client, auth_headers):
    response = client.get('/api/pets', headers=auth_headers)
    assert response.status_code == 200
    pets = response.get_json()
    assert [p['name'] for p in pets] == ["Whiskers"]
    assert pets[0]['age'] == 3
    assert pets[0]['species'] == "cat"

def test_register_update_and_delete_pet(client, auth_headers):
    response = client.post('/api/pets', json=NEW_PET, headers=auth_headers)
    assert response.status_code == 201
    created = response.get_json()
    assert created['age'] == 2
    assert created['allergens'] == ["Beef"]

    pet_id = created['pet_id']
    response = client.put(f'/api/pets/{pet_id}', json={**NEW_PET, "name": "Milo Jr."}, headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json()['name'] == "Milo Jr."
    assert response.get_json()['created_at'] == created['created_at']

    response = client.delete(f'/api/pets/{pet_id}', headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json() == {"pet_id": pet_id, "deleted_health_records": 0, "deleted_weight_records": 0}
    assert client.get(f'/api/pets/{pet_id}', headers=auth_headers).status_code == 404

def test_register_pet_with_blank_name_is_rejected(client, auth_headers):
    response = client.post('/api/pets', json={**NEW_PET, "name": "   "}, headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()['error_code'] == "VALIDATION_ERROR"

def test_register_pet_with_missing_fields(client, auth_headers):
    response = client.post('/api/pets', json={"name": "Milo"}, headers=auth_headers)
    assert response.status_code == 400
    assert 'birth_date' in response.get_json()['details']

def test_delete_sample_pet_cascades(client, auth_headers):
    response = client.delete(f'/api/pets/{SAMPLE_PET_ID}', headers=auth_headers)
    assert response.get_json()['deleted_health_records'] == 5
    assert response.get_json()['deleted_weight_records'] == 9

def test_other_users_cannot_see_pet(client):
    login = client.post('/api/auth/login', json={"email": "stranger@example.com", "password": "secret1"})
    headers = {'Authorization': f"Bearer {login.get_json()['token']}"}
    assert client.get('/api/pets', headers=headers).get_json() == []
    response = client.get(f'/api/pets/{SAMPLE_PET_ID}', headers=headers)
    assert response.status_code == 403
    assert response.get_json()['error_code'] == "FORBIDDEN"

def test_breeds_by_species(client, auth_headers):
    response = client.get('/api/pets/breeds?species=dog', headers=auth_headers)
    assert response.status_code == 200
    assert "Shiba Inu" in response.get_json()['breeds']
    assert client.get('/api/pets/breeds?species=bird', headers=auth_headers).status_code == 400

def test_pet_summary(client, auth_headers):
    response = client.get(f'/api/pets/{SAMPLE_PET_ID}/summary?time_range=weekly', headers=auth_headers)
    assert response.status_code == 200
    body = response.get_json()
    assert body['latest_weight']['weight'] == 5.2
    assert body['weight_delta'] == -0.1
    assert body['health_summary']['days'] == 7
    assert body['health_summary']['total_records'] == 2
    assert body['next_vaccination_due'] is not None

def test_pet_summary_rejects_unknown_range(client, auth_headers):
    response = client.get(f'/api/pets/{SAMPLE_PET_ID}/summary?time_range=daily', headers=auth_headers)
    assert response.status_code == 400

def test_non_json_body_is_a_validation_error(client, auth_headers):
    response = client.post('/api/pets', data='x', content_type='text/plain', headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()['error_code'] == "VALIDATION_ERROR"

def test_profile_includes_age_in_months(client, auth_headers):
    pet = client.get(f'/api/pets/{SAMPLE_PET_ID}', headers=auth_headers).get_json()
    assert pet['age_months'] == 36
