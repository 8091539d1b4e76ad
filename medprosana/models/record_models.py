# /medprosana/models/record_models.py
from datetime import datetime, date
from medprosana.extensions import db
from medprosana.models.patient_models import _isoformat


def _today():
    return date.today().isoformat()


class Medication(db.Model):
    """Append-only medication history entry."""
    __tablename__ = 'Medications'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    patient_id = db.Column(
        db.Integer, db.ForeignKey('Patients.id', ondelete='CASCADE'), nullable=False, index=True
    )
    name = db.Column(db.String(255), nullable=False)
    dosage = db.Column(db.String(255), nullable=False)
    date = db.Column(db.String(10), default=_today)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    patient = db.relationship('Patient', back_populates='medications')

    def to_dict(self):
        return {
            'id': self.id,
            'patient_id': self.patient_id,
            'name': self.name,
            'dosage': self.dosage,
            'date': self.date,
            'created_at': _isoformat(self.created_at),
        }


class LabResult(db.Model):
    """Append-only lab result entry."""
    __tablename__ = 'LabResults'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    patient_id = db.Column(
        db.Integer, db.ForeignKey('Patients.id', ondelete='CASCADE'), nullable=False, index=True
    )
    name = db.Column(db.String(255), nullable=False)
    result = db.Column(db.String(255), nullable=False)
    date = db.Column(db.String(10), default=_today)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    patient = db.relationship('Patient', back_populates='lab_results')

    def to_dict(self):
        return {
            'id': self.id,
            'patient_id': self.patient_id,
            'name': self.name,
            'result': self.result,
            'date': self.date,
            'created_at': _isoformat(self.created_at),
        }


class DialysisSession(db.Model):
    """One hemodialysis treatment encounter."""
    __tablename__ = 'Sessions'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    patient_id = db.Column(
        db.Integer, db.ForeignKey('Patients.id', ondelete='CASCADE'), nullable=False, index=True
    )
    date = db.Column(db.String(10), default=_today)

    # Weights in kg
    pre_weight = db.Column(db.Float, nullable=False)
    post_weight = db.Column(db.Float)

    # Blood pressure as written on the chart, e.g. '130/80'
    pre_bp = db.Column(db.String(20))
    post_bp = db.Column(db.String(20))

    access_condition = db.Column(db.String(255))
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    patient = db.relationship('Patient', back_populates='sessions')

    def to_dict(self):
        return {
            'id': self.id,
            'patient_id': self.patient_id,
            'date': self.date,
            'pre_weight': self.pre_weight,
            'post_weight': self.post_weight,
            'pre_bp': self.pre_bp,
            'post_bp': self.post_bp,
            'access_condition': self.access_condition,
            'notes': self.notes,
            'created_at': _isoformat(self.created_at),
        }
