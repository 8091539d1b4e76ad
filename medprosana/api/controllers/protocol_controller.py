from flask import jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from medprosana.extensions import db
from medprosana.models.patient_models import Protocol


def get_protocol(patient):
    """Returns the patient's protocol, or an empty object if the row is missing."""
    protocol = patient.protocol
    return jsonify({'protocol': protocol.to_dict() if protocol else {}}), 200


def update_protocol(patient, payload):
    """Overwrites the five protocol fields and bumps updated_at."""
    protocol = patient.protocol
    if protocol is None:
        # Rows created before protocols were seeded transactionally
        protocol = Protocol()
        patient.protocol = protocol

    protocol.overwrite(payload.model_dump())

    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise

    current_app.logger.info(f"Protocol updated for patient {patient.id}")
    return '', 204
