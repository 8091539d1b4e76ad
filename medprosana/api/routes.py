# /medprosana/api/routes.py

from . import api_bp
from .schemas import PatientCreate, MedicationCreate, LabResultCreate, SessionCreate, ProtocolUpdate
from medprosana.utils.decorators import validate_json, patient_required
from .controllers import patient_controller, record_controller, protocol_controller


# --- Patient Roster Endpoints ---
@api_bp.route('/patients', methods=['GET'])
def get_patients_route():
    return patient_controller.get_all_patients()

@api_bp.route('/patients', methods=['POST'])
@validate_json(PatientCreate)
def create_patient_route(payload):
    return patient_controller.create_patient(payload)

@api_bp.route('/patients/<int:patient_id>', methods=['GET'])
@patient_required
def get_patient_route(patient):
    return patient_controller.get_patient(patient)

@api_bp.route('/patients/<int:patient_id>', methods=['DELETE'])
@patient_required
def delete_patient_route(patient):
    return patient_controller.delete_patient(patient)


# --- Medication Endpoints ---
@api_bp.route('/patients/<int:patient_id>/medications', methods=['GET'])
@patient_required
def get_medications_route(patient):
    return record_controller.get_medications(patient)

@api_bp.route('/patients/<int:patient_id>/medications', methods=['POST'])
@patient_required
@validate_json(MedicationCreate)
def add_medication_route(patient, payload):
    return record_controller.add_medication(patient, payload)


# --- Lab Result Endpoints ---
@api_bp.route('/patients/<int:patient_id>/labs', methods=['GET'])
@patient_required
def get_lab_results_route(patient):
    return record_controller.get_lab_results(patient)

@api_bp.route('/patients/<int:patient_id>/labs', methods=['POST'])
@patient_required
@validate_json(LabResultCreate)
def add_lab_result_route(patient, payload):
    return record_controller.add_lab_result(patient, payload)


# --- Dialysis Session Endpoints ---
@api_bp.route('/patients/<int:patient_id>/sessions', methods=['GET'])
@patient_required
def get_sessions_route(patient):
    return record_controller.get_sessions(patient)

@api_bp.route('/patients/<int:patient_id>/sessions', methods=['POST'])
@patient_required
@validate_json(SessionCreate)
def add_session_route(patient, payload):
    return record_controller.add_session(patient, payload)


# --- Protocol Endpoints ---
@api_bp.route('/patients/<int:patient_id>/protocol', methods=['GET'])
@patient_required
def get_protocol_route(patient):
    return protocol_controller.get_protocol(patient)

@api_bp.route('/patients/<int:patient_id>/protocol', methods=['PUT'])
@patient_required
@validate_json(ProtocolUpdate)
def update_protocol_route(patient, payload):
    return protocol_controller.update_protocol(patient, payload)
