from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from medprosana.extensions import db
from medprosana.models.record_models import Medication, LabResult, DialysisSession


def _newest_first(model, patient):
    return model.query.filter_by(patient_id=patient.id).order_by(
        model.created_at.desc(), model.id.desc()
    ).all()


def _append(record, label):
    try:
        db.session.add(record)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    current_app.logger.info(f"{label} {record.id} added for patient {record.patient_id}")
    return record


def _dated(payload):
    """Only pass `date` through when the caller supplied one, so the column default applies."""
    return {'date': payload.date} if payload.date else {}


# --- Medications ---

def get_medications(patient):
    medications = _newest_first(Medication, patient)
    return jsonify({'medications': [m.to_dict() for m in medications]}), 200


def add_medication(patient, payload):
    medication = _append(Medication(
        patient_id=patient.id,
        name=payload.name,
        dosage=payload.dosage,
        **_dated(payload)
    ), 'Medication')
    return jsonify({'success': True, 'medication': medication.to_dict()}), 201


# --- Lab results ---

def get_lab_results(patient):
    lab_results = _newest_first(LabResult, patient)
    return jsonify({'labResults': [r.to_dict() for r in lab_results]}), 200


def add_lab_result(patient, payload):
    lab_result = _append(LabResult(
        patient_id=patient.id,
        name=payload.name,
        result=payload.result,
        **_dated(payload)
    ), 'Lab result')
    return jsonify({'success': True, 'labResult': lab_result.to_dict()}), 201


# --- Dialysis sessions ---

def get_sessions(patient):
    sessions = _newest_first(DialysisSession, patient)
    return jsonify({'sessions': [s.to_dict() for s in sessions]}), 200


def add_session(patient, payload):
    session = _append(DialysisSession(
        patient_id=patient.id,
        pre_weight=payload.pre_weight,
        post_weight=payload.post_weight,
        pre_bp=payload.pre_bp,
        post_bp=payload.post_bp,
        access_condition=payload.access_condition,
        notes=payload.notes,
        **_dated(payload)
    ), 'Session')
    return jsonify({'success': True, 'session': session.to_dict()}), 201
