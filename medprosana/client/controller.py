import logging
from medprosana.client.api_client import ApiClient, ApiError
from medprosana.client.render import render_app
from medprosana.client.state import (
    Store, DETAIL_VIEW, LoadingChanged, RosterLoaded, PatientSelected, DetailLoaded,
    DetailFailed, TabSelected, BackToList, Notified, NotificationsCleared, StatusChanged,
)

logger = logging.getLogger(__name__)

class ClinicClient:
    """Drives the roster and detail views against the API."""

    def __init__(self, api: ApiClient, store: Store = None, max_workers=5):
        self.api = api
        self.store = store or Store()
        self.max_workers = max_workers

    @property
    def state(self):
        return self.store.state

    def _notify(self, message, level='success'):
        self.store.dispatch(Notified(message, level))

    def _call(self, fetch, *args):
        """Runs one API call with the loading flag set; failures become an error toast."""
        self.store.dispatch(LoadingChanged(True))
        try:
            return fetch(*args)
        except ApiError as e:
            logger.error(f"API call failed: {e.message}")
            self._notify(e.message, 'error')
            return None
        finally:
            self.store.dispatch(LoadingChanged(False))

    # --- Roster ---

    def load_roster(self):
        self.store.dispatch(StatusChanged(f"Connecting to: {self.api.base_url}"))
        self.store.dispatch(LoadingChanged(True))
        try:
            patients = self.api.list_patients()
        except ApiError as e:
            logger.error(f"Roster load failed: {e.message}")
            self._notify(e.message, 'error')
            self.store.dispatch(StatusChanged(f"API Connection FAILED: {e.message}", 'error'))
            return None
        finally:
            self.store.dispatch(LoadingChanged(False))

        self.store.dispatch(StatusChanged('Connection successful. API is responsive.', 'success'))
        self.store.dispatch(RosterLoaded(patients))

        # Keep an open detail view in sync with the fresh roster
        current = self.state.current_patient
        if self.state.view == DETAIL_VIEW and current:
            if any(p['id'] == current.id for p in self.state.patient_list):
                self.refresh_detail(current.id)
        return self.state.patient_list

    def add_patient(self, name, familyname, birthdate):
        if not (name and familyname and birthdate):
            self._notify('Please fill in all required patient fields.', 'error')
            return None

        patient = self._call(self.api.create_patient, name, familyname, birthdate)
        if patient:
            self._notify(f"{name} {familyname} added successfully.")
            self.load_roster()
        return patient

    # --- Detail ---

    def open_patient(self, patient_id):
        patient = next((p for p in self.state.patient_list if p['id'] == int(patient_id)), None)
        if patient is None:
            self._notify('Patient not found in roster.', 'warning')
            return None

        self.store.dispatch(PatientSelected(patient))
        return self.refresh_detail(patient['id'])

    def refresh_detail(self, patient_id):
        """Re-fetches the full detail set; a failed patient fetch falls back to the roster."""
        self.store.dispatch(LoadingChanged(True))
        try:
            results = self.api.fetch_patient_detail(patient_id, max_workers=self.max_workers)
        finally:
            self.store.dispatch(LoadingChanged(False))

        for key, result in results.items():
            if isinstance(result, ApiError):
                logger.error(f"Detail fetch '{key}' for patient {patient_id} failed: {result.message}")
                self._notify(result.message, 'error')

        def ok(key):
            result = results[key]
            return None if isinstance(result, ApiError) else result

        if ok('patient') is None:
            self._notify('Patient failed to load.', 'error')
            self.store.dispatch(DetailFailed())
            self.load_roster()
            return None

        self.store.dispatch(DetailLoaded(
            patient=ok('patient'),
            medications=ok('medications'),
            lab_results=ok('lab_results'),
            sessions=ok('sessions'),
            protocol=ok('protocol'),
        ))
        return self.state.current_patient

    def select_tab(self, tab):
        self.store.dispatch(TabSelected(tab))

    def back_to_list(self):
        self.store.dispatch(BackToList())
        return self.load_roster()

    def delete_patient(self):
        current = self.state.current_patient
        if not current:
            return False

        if self._call(self.api.delete_patient, current.id) is None:
            return False
        self._notify(f"{current.full_name} deleted.")
        self.back_to_list()
        return True

    # --- Records ---

    def _add_record(self, kind, add, record):
        current = self.state.current_patient
        if not current:
            return False

        result = self._call(add, current.id, record)
        if result and result.get('success'):
            self._notify(f"New entry added to {kind}.")
            self.refresh_detail(current.id)
            return True
        return False

    def add_medication(self, name, dosage):
        if not (name and dosage):
            return False
        return self._add_record('medications', self.api.add_medication, {'name': name, 'dosage': dosage})

    def add_lab_result(self, name, result):
        if not (name and result):
            return False
        return self._add_record('labs', self.api.add_lab_result, {'name': name, 'result': result})

    def add_session(self, pre_weight, post_weight=None, pre_bp=None, post_bp=None,
                    access_condition=None, notes=None):
        if pre_weight in (None, ''):
            return False
        return self._add_record('sessions', self.api.add_session, {
            'pre_weight': pre_weight,
            'post_weight': post_weight,
            'pre_bp': pre_bp,
            'post_bp': post_bp,
            'access_condition': access_condition,
            'notes': notes,
        })

    def update_protocol(self, dialyzer, access, dialysate_flow, blood_flow, duration):
        current = self.state.current_patient
        if not current:
            return False

        result = self._call(self.api.update_protocol, current.id, {
            'dialyzer': dialyzer,
            'access': access,
            'dialysateFlow': dialysate_flow,
            'bloodFlow': blood_flow,
            'duration': duration,
        })
        if result and result.get('success'):
            self._notify('Hemodialysis Protocol updated.')
            self.refresh_detail(current.id)
            return True
        return False

    # --- Rendering ---

    def dismiss_notifications(self):
        self.store.dispatch(NotificationsCleared())

    def render(self):
        return render_app(self.state)
