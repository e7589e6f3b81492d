# pawcare/api/test_meta_routes.py


def test_presentation_tables(client):
    response = client.get('/api/meta/presentation')
    assert response.status_code == 200
    tables = response.get_json()
    assert set(tables) == {'record_type', 'severity', 'file_type', 'illness_category',
                           'species', 'gender', 'language', 'time_range'}
    assert tables['severity']['severe']['color'] == "red"
    assert tables['language']['zh-Hant']['display_name'] == "繁體中文"
    assert tables['time_range']['quarterly']['display_name'] == "Quarterly"
