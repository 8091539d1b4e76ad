from datetime import date
from medprosana.client.render import (
    calculate_age, weight_loss, record_date, render_app, render_page,
)
from medprosana.client.state import ClientState, PatientDetail, Notification, DETAIL_VIEW

PATIENT = {'id': 7, 'name': 'Amina', 'familyname': 'Benali', 'birthdate': '1961-04-12'}


def _detail_state(tab, **records):
    return ClientState(
        view=DETAIL_VIEW,
        current_patient=PatientDetail.from_api(PATIENT, **records),
        current_tab=tab,
    )


def test_calculate_age_respects_birthday():
    today = date(2024, 4, 11)
    assert calculate_age('1961-04-12', today) == 62
    assert calculate_age('1961-04-11', today) == 63
    assert calculate_age('', today) == 'N/A'
    assert calculate_age('not a date', today) == 'N/A'


def test_weight_loss():
    assert weight_loss({'pre_weight': 72.4, 'post_weight': 70.1}) == '2.30'
    assert weight_loss({'pre_weight': '72', 'post_weight': None}) == 'N/A'
    assert weight_loss({}) == 'N/A'


def test_record_date_falls_back_to_created_at():
    assert record_date({'date': '2024-03-01'}) == '2024-03-01'
    assert record_date({'created_at': '2024-03-02T10:11:12'}) == '2024-03-02'


def test_loading_placeholder():
    html = render_app(ClientState(is_loading=True))
    assert 'Loading Data...' in html


def test_empty_roster():
    html = render_app(ClientState())
    assert 'No Patients Registered' in html


def test_roster_cards_escape_names():
    state = ClientState(patient_list=(
        PATIENT,
        {'id': 8, 'name': '<script>alert(1)</script>', 'familyname': 'X', 'birthdate': '1980-01-01'},
    ))

    html = render_app(state)

    assert 'Patient Roster' in html
    assert 'data-patient-id="7"' in html
    assert 'Amina Benali' in html
    assert '<script>alert(1)</script>' not in html
    assert '&lt;script&gt;' in html


def test_detail_marks_active_tab():
    html = render_app(_detail_state('labs'))

    assert 'data-tab="labs" class="tab-btn p-4 text-gray-600 hover:text-emerald-500 transition tab-btn-active"' in html
    assert 'data-tab="meds" class="tab-btn p-4 text-gray-600 hover:text-emerald-500 transition"' in html
    assert 'Age ' in html and 'HD Patient' in html


def test_demographics_tab():
    html = render_app(_detail_state('info'))

    assert 'Full Name' in html
    assert '1961-04-12' in html


def test_medications_tab():
    html = render_app(_detail_state('meds', medications=[
        {'name': 'EPO', 'dosage': '4000 UI', 'date': '2024-02-01', 'created_at': '2024-02-01T08:00:00'},
    ]))

    assert '+ Add Medication' in html
    assert 'Dosage: <b>4000 UI</b>' in html


def test_labs_tab_empty():
    html = render_app(_detail_state('labs'))

    assert '+ Add Lab Result' in html
    assert 'No records found.' in html


def test_sessions_tab():
    html = render_app(_detail_state('sessions', sessions=[
        {'date': '2024-03-01', 'pre_weight': 72.4, 'post_weight': 70.1, 'pre_bp': '142/85',
         'post_bp': '128/78', 'access_condition': None, 'notes': 'Cramps', 'created_at': '2024-03-01T08:00:00'},
    ]))

    assert 'Date: 2024-03-01' in html
    assert 'Access OK' in html
    assert 'Loss: 2.30 kg' in html
    assert '142/85 / 128/78' in html
    assert 'Note: Cramps' in html


def test_sessions_tab_empty():
    html = render_app(_detail_state('sessions'))
    assert 'No dialysis sessions recorded yet.' in html


def test_protocol_tab_shows_na_for_missing_fields():
    html = render_app(_detail_state('protocol', protocol={'dialyzer': 'F8HPS'}))

    assert 'F8HPS' in html
    assert 'Edit Protocol' in html
    assert html.count('N/A') == 4


def test_page_includes_status_and_toasts():
    state = ClientState(
        notifications=(Notification('Saved'), Notification('Boom', 'error')),
        status=Notification('API Connection FAILED: Network error.', 'error'),
    )

    html = render_page(state)

    assert html.lstrip().startswith('<!DOCTYPE html>')
    assert 'API Connection FAILED: Network error.' in html
    assert 'bg-red-500' in html and 'bg-green-500' in html
    assert 'No Patients Registered' in html
