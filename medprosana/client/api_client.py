import logging
from concurrent.futures import ThreadPoolExecutor
import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised when the API is unreachable or answers with a non-2xx status."""

    def __init__(self, status, message):
        super().__init__(message)
        self.status = status
        self.message = message


class ApiClient:
    """Thin wrapper around the MedProSana JSON API."""

    def __init__(self, base_url, timeout=10, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method, path, payload=None):
        url = f"{self.base_url}{path}"
        logger.debug(f"[API] Fetching: {method} {url}")

        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"[API] {method} {url} failed: {e}")
            raise ApiError(None, 'Network error.') from e

        if not response.ok:
            logger.error(f"[API ERROR] Status: {response.status_code} {response.text}")
            raise ApiError(response.status_code, f"API Error {response.status_code}.")

        if response.status_code == 204 or method in ('PUT', 'DELETE'):
            return {'success': True}
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"[API ERROR] {method} {url} returned a non-JSON body")
            raise ApiError(response.status_code, f"API Error {response.status_code}.") from e

    # --- Patients ---

    def list_patients(self):
        return self._request('GET', '/patients')['patients']

    def get_patient(self, patient_id):
        return self._request('GET', f'/patients/{patient_id}')['patient']

    def create_patient(self, name, familyname, birthdate):
        data = {'name': name, 'familyname': familyname, 'birthdate': birthdate}
        return self._request('POST', '/patients', data)['patient']

    def delete_patient(self, patient_id):
        return self._request('DELETE', f'/patients/{patient_id}')

    # --- Records ---

    def list_medications(self, patient_id):
        return self._request('GET', f'/patients/{patient_id}/medications')['medications']

    def add_medication(self, patient_id, record):
        return self._request('POST', f'/patients/{patient_id}/medications', record)

    def list_lab_results(self, patient_id):
        return self._request('GET', f'/patients/{patient_id}/labs')['labResults']

    def add_lab_result(self, patient_id, record):
        return self._request('POST', f'/patients/{patient_id}/labs', record)

    def list_sessions(self, patient_id):
        return self._request('GET', f'/patients/{patient_id}/sessions')['sessions']

    def add_session(self, patient_id, record):
        return self._request('POST', f'/patients/{patient_id}/sessions', record)

    # --- Protocol ---

    def get_protocol(self, patient_id):
        return self._request('GET', f'/patients/{patient_id}/protocol')['protocol']

    def update_protocol(self, patient_id, protocol):
        return self._request('PUT', f'/patients/{patient_id}/protocol', protocol)

    def fetch_patient_detail(self, patient_id, max_workers=5):
        """
        Fetches the patient and its four record sets in parallel.

        Returns a dict keyed by 'patient', 'medications', 'lab_results',
        'protocol' and 'sessions'. A failed call leaves its ApiError in place
        of the result so the caller decides how to degrade.
        """
        calls = {
            'patient': self.get_patient,
            'medications': self.list_medications,
            'lab_results': self.list_lab_results,
            'protocol': self.get_protocol,
            'sessions': self.list_sessions,
        }

        def run(fetch):
            try:
                return fetch(patient_id)
            except ApiError as e:
                return e

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = {key: executor.submit(run, fetch) for key, fetch in calls.items()}
            return {key: future.result() for key, future in futures.items()}
