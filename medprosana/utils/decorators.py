from functools import wraps
from flask import request, jsonify
from pydantic import ValidationError
from medprosana.extensions import db
from medprosana.models.patient_models import Patient

# Largest value an INTEGER primary key can hold
MAX_PATIENT_ID = 2 ** 63 - 1


def validate_json(schema):
    """Validates the JSON body against a pydantic schema and passes it on as `payload`."""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            data = request.get_json(silent=True)
            if not isinstance(data, dict):
                return jsonify({'error': 'Missing fields', 'details': [
                    {'field': 'body', 'message': 'Request body must be a JSON object'}
                ]}), 400

            try:
                payload = schema.model_validate(data)
            except ValidationError as e:
                details = [
                    {'field': '.'.join(str(part) for part in err['loc']) or 'body', 'message': err['msg']}
                    for err in e.errors()
                ]
                return jsonify({'error': 'Missing fields', 'details': details}), 400

            return f(*args, payload=payload, **kwargs)
        return decorated_function
    return decorator


def patient_required(f):
    """Resolves the `patient_id` URL segment to a Patient, or answers 404."""
    @wraps(f)
    def decorated_function(patient_id, *args, **kwargs):
        patient = db.session.get(Patient, patient_id) if patient_id <= MAX_PATIENT_ID else None
        if not patient:
            return jsonify({'error': 'Patient not found'}), 404
        return f(patient, *args, **kwargs)
    return decorated_function
