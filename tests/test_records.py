import pytest
from datetime import date


def test_add_and_list_medications_newest_first(client, patient):
    pid = patient['id']
    first = client.post(f'/api/patients/{pid}/medications', json={'name': 'Heparin', 'dosage': '5000 UI'})
    second = client.post(f'/api/patients/{pid}/medications', json={'name': 'EPO', 'dosage': '4000 UI'})

    assert first.status_code == 201
    assert first.get_json()['success'] is True
    assert second.get_json()['medication']['name'] == 'EPO'

    response = client.get(f'/api/patients/{pid}/medications')
    assert response.status_code == 200
    medications = response.get_json()['medications']
    assert [m['name'] for m in medications] == ['EPO', 'Heparin']
    assert medications[0]['date'] == date.today().isoformat()
    assert medications[0]['patient_id'] == pid


def test_add_medication_missing_dosage(client, patient):
    response = client.post(f"/api/patients/{patient['id']}/medications", json={'name': 'EPO', 'dosage': ''})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Missing fields'


def test_add_medication_accepts_explicit_date(client, patient):
    response = client.post(f"/api/patients/{patient['id']}/medications",
                           json={'name': 'EPO', 'dosage': '4000 UI', 'date': '2024-03-01'})

    assert response.status_code == 201
    assert response.get_json()['medication']['date'] == '2024-03-01'


def test_add_medication_rejects_bad_date(client, patient):
    response = client.post(f"/api/patients/{patient['id']}/medications",
                           json={'name': 'EPO', 'dosage': '4000 UI', 'date': 'yesterday'})

    assert response.status_code == 400


def test_add_and_list_labs_newest_first(client, patient):
    pid = patient['id']
    client.post(f'/api/patients/{pid}/labs', json={'name': 'Urea', 'result': '18 mmol/L'})
    client.post(f'/api/patients/{pid}/labs', json={'name': 'Potassium', 'result': '5.1 mmol/L'})

    response = client.get(f'/api/patients/{pid}/labs')

    assert response.status_code == 200
    labs = response.get_json()['labResults']
    assert [r['name'] for r in labs] == ['Potassium', 'Urea']
    assert labs[0]['result'] == '5.1 mmol/L'


def test_add_lab_missing_result(client, patient):
    response = client.post(f"/api/patients/{patient['id']}/labs", json={'name': 'Urea'})
    assert response.status_code == 400


def test_add_and_list_sessions(client, patient):
    pid = patient['id']
    response = client.post(f'/api/patients/{pid}/sessions', json={
        'pre_weight': '72.4',
        'post_weight': '70.1',
        'pre_bp': '142/85',
        'post_bp': '128/78',
        'access_condition': 'Good',
        'notes': 'Uneventful'
    })
    assert response.status_code == 201
    session = response.get_json()['session']
    assert session['pre_weight'] == pytest.approx(72.4)
    assert session['post_weight'] == pytest.approx(70.1)

    client.post(f'/api/patients/{pid}/sessions', json={'pre_weight': 71.0, 'post_weight': ''})

    sessions = client.get(f'/api/patients/{pid}/sessions').get_json()['sessions']
    assert len(sessions) == 2
    assert sessions[0]['pre_weight'] == pytest.approx(71.0)
    assert sessions[0]['post_weight'] is None
    assert sessions[1]['notes'] == 'Uneventful'


def test_add_session_requires_pre_weight(client, patient):
    response = client.post(f"/api/patients/{patient['id']}/sessions", json={'post_weight': 70})
    assert response.status_code == 400

    response = client.post(f"/api/patients/{patient['id']}/sessions", json={'pre_weight': 'heavy'})
    assert response.status_code == 400


def test_records_for_other_patient_are_not_listed(client, patient):
    other = client.post('/api/patients', json={'name': 'K', 'familyname': 'H', 'birthdate': '1978-11-03'})
    other_id = other.get_json()['patient']['id']
    client.post(f"/api/patients/{patient['id']}/medications", json={'name': 'EPO', 'dosage': '4000 UI'})

    response = client.get(f'/api/patients/{other_id}/medications')
    assert response.get_json()['medications'] == []


@pytest.mark.parametrize('resource', ['medications', 'labs', 'sessions', 'protocol'])
def test_unknown_patient_resources_are_404(client, resource):
    response = client.get(f'/api/patients/777/{resource}')

    assert response.status_code == 404
    assert response.get_json() == {'error': 'Patient not found'}


def test_post_record_for_unknown_patient_is_404(client):
    response = client.post('/api/patients/777/medications', json={'name': 'EPO', 'dosage': '4000 UI'})
    assert response.status_code == 404


@pytest.mark.parametrize('resource', ['medications', 'labs', 'sessions', 'protocol'])
def test_resources_for_patient_id_beyond_integer_range_are_404(client, resource):
    response = client.get(f'/api/patients/99999999999999999999/{resource}')

    assert response.status_code == 404
    assert response.get_json() == {'error': 'Patient not found'}


@pytest.mark.parametrize('weights', [
    {'pre_weight': 'nan'},
    {'pre_weight': 'inf'},
    {'pre_weight': '-Infinity'},
    {'pre_weight': 72.4, 'post_weight': 'nan'},
    {'pre_weight': 72.4, 'post_weight': 'inf'},
])
def test_add_session_rejects_non_finite_weights(client, patient, weights):
    pid = patient['id']
    response = client.post(f'/api/patients/{pid}/sessions', json=weights)

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Missing fields'
    assert client.get(f'/api/patients/{pid}/sessions').get_json()['sessions'] == []
