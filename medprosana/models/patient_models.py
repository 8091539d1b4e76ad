# /medprosana/models/patient_models.py
from datetime import datetime
from medprosana.extensions import db


def _isoformat(value):
    return value.isoformat() if value else None


class Patient(db.Model):
    """A dialysis patient on the roster."""
    __tablename__ = 'Patients'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(255), nullable=False)
    familyname = db.Column(db.String(255), nullable=False)
    birthdate = db.Column(db.String(10), nullable=False)  # YYYY-MM-DD
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Dependent rows go with the patient, in the ORM and in the schema
    protocol = db.relationship(
        'Protocol', back_populates='patient', uselist=False,
        cascade="all, delete-orphan", passive_deletes=True
    )
    medications = db.relationship(
        'Medication', back_populates='patient', lazy='dynamic',
        cascade="all, delete-orphan", passive_deletes=True
    )
    lab_results = db.relationship(
        'LabResult', back_populates='patient', lazy='dynamic',
        cascade="all, delete-orphan", passive_deletes=True
    )
    sessions = db.relationship(
        'DialysisSession', back_populates='patient', lazy='dynamic',
        cascade="all, delete-orphan", passive_deletes=True
    )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'familyname': self.familyname,
            'birthdate': self.birthdate,
            'created_at': _isoformat(self.created_at),
        }


class Protocol(db.Model):
    """Hemodialysis treatment parameters, one row per patient."""
    __tablename__ = 'Protocols'

    EDITABLE_FIELDS = ('dialyzer', 'access', 'dialysateFlow', 'bloodFlow', 'duration')

    patient_id = db.Column(
        db.Integer, db.ForeignKey('Patients.id', ondelete='CASCADE'), primary_key=True
    )
    dialyzer = db.Column(db.String(100))
    access = db.Column(db.String(100))
    dialysate_flow = db.Column('dialysateFlow', db.String(100))
    blood_flow = db.Column('bloodFlow', db.String(100))
    duration = db.Column(db.String(100))
    updated_at = db.Column(db.DateTime, default=datetime.utcnow)

    patient = db.relationship('Patient', back_populates='protocol')

    @classmethod
    def from_defaults(cls, defaults):
        return cls(
            dialyzer=defaults['dialyzer'],
            access=defaults['access'],
            dialysate_flow=defaults['dialysateFlow'],
            blood_flow=defaults['bloodFlow'],
            duration=defaults['duration'],
        )

    def overwrite(self, values):
        """Replaces all five editable fields; missing keys become null."""
        self.dialyzer = values.get('dialyzer')
        self.access = values.get('access')
        self.dialysate_flow = values.get('dialysateFlow')
        self.blood_flow = values.get('bloodFlow')
        self.duration = values.get('duration')
        self.updated_at = datetime.utcnow()

    def to_dict(self):
        return {
            'patient_id': self.patient_id,
            'dialyzer': self.dialyzer,
            'access': self.access,
            'dialysateFlow': self.dialysate_flow,
            'bloodFlow': self.blood_flow,
            'duration': self.duration,
            'updated_at': _isoformat(self.updated_at),
        }
