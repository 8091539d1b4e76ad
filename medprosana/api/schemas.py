# /medprosana/api/schemas.py
import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class PatientCreate(BaseModel):
    name: str = Field(min_length=1)
    familyname: str = Field(min_length=1)
    birthdate: str = Field(min_length=1)


class _DatedRecord(BaseModel):
    date: Optional[str] = None

    @field_validator('date')
    @classmethod
    def date_is_iso(cls, value):
        if value is not None:
            datetime.date.fromisoformat(value)
        return value


class MedicationCreate(_DatedRecord):
    name: str = Field(min_length=1)
    dosage: str = Field(min_length=1)


class LabResultCreate(_DatedRecord):
    name: str = Field(min_length=1)
    result: str = Field(min_length=1)


class SessionCreate(_DatedRecord):
    pre_weight: float = Field(allow_inf_nan=False)
    post_weight: Optional[float] = Field(default=None, allow_inf_nan=False)
    pre_bp: Optional[str] = None
    post_bp: Optional[str] = None
    access_condition: Optional[str] = None
    notes: Optional[str] = None

    @field_validator('post_weight', mode='before')
    @classmethod
    def blank_is_none(cls, value):
        # Chart entries often leave the post-dialysis weight empty
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ProtocolUpdate(BaseModel):
    dialyzer: Optional[str] = None
    access: Optional[str] = None
    dialysateFlow: Optional[str] = None
    bloodFlow: Optional[str] = None
    duration: Optional[str] = None
