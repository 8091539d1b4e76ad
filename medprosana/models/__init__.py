from medprosana.models.patient_models import Patient, Protocol
from medprosana.models.record_models import Medication, LabResult, DialysisSession

__all__ = ['Patient', 'Protocol', 'Medication', 'LabResult', 'DialysisSession']
