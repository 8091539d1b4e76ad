from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from medprosana.extensions import db
from medprosana.models.patient_models import Patient, Protocol


def get_all_patients():
    """Returns the roster ordered by family name."""
    patients = Patient.query.order_by(
        Patient.familyname.asc(), Patient.name.asc(), Patient.id.asc()
    ).all()
    return jsonify({'patients': [p.to_dict() for p in patients]}), 200


def create_patient(payload):
    """Registers a patient together with the default hemodialysis protocol."""
    patient = Patient(
        name=payload.name,
        familyname=payload.familyname,
        birthdate=payload.birthdate
    )
    patient.protocol = Protocol.from_defaults(current_app.config['DEFAULT_PROTOCOL'])

    # Patient and protocol are flushed in the same transaction
    try:
        db.session.add(patient)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    current_app.logger.info(f"Patient {patient.id} created with default protocol")
    return jsonify({'patient': patient.to_dict()}), 201


def get_patient(patient):
    return jsonify({'patient': patient.to_dict()}), 200


def delete_patient(patient):
    """Deletes a patient; protocol, medications, labs and sessions cascade."""
    patient_id = patient.id
    try:
        db.session.delete(patient)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    current_app.logger.info(f"Patient {patient_id} deleted with all dependent records")
    return '', 204
