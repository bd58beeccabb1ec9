from pydantic import BaseModel, field_validator
from datetime import datetime

# column widths in fleet.models.vehicle
MAX_LEN = {
    "vin": 64,
    "company": 128,
    "status": 64,
    "transport_type": 32,
    "cargo_name": 255,
    "cargo_weight": 64,
    "cargo_size": 64,
}

def _check_len(v: str | None, field: str):
    if v is not None and len(v) > MAX_LEN[field]:
        raise ValueError(f"{field} must be at most {MAX_LEN[field]} characters")
    return v

class VehicleCreate(BaseModel):
    vin: str
    company: str
    status: str | None = None
    transport_type: str | None = None
    cargo_name: str | None = None
    cargo_weight: str | None = None
    cargo_size: str | None = None
    mintrans_permit: bool | None = None
    escort_received: bool | None = None

    @field_validator("vin", "company")
    @classmethod
    def required_trim(cls, v: str, info):
        v = v.strip()
        if not v:
            raise ValueError("field is required")
        return _check_len(v, info.field_name)

    @field_validator("cargo_name", "cargo_weight", "cargo_size", mode="before")
    @classmethod
    def number_as_text(cls, v):
        # the frontend sends weights and sizes as bare numbers
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("status", "transport_type", "cargo_name", "cargo_weight", "cargo_size")
    @classmethod
    def text_len(cls, v: str | None, info):
        return _check_len(v, info.field_name)

class StatusUpdate(BaseModel):
    id: int
    status: str | None = None

    @field_validator("status")
    @classmethod
    def status_len(cls, v: str | None):
        return _check_len(v, "status")

class MintransUpdate(BaseModel):
    id: int
    value: bool

class FlagsUpdate(BaseModel):
    id: int
    mintrans_permit: bool
    escort_received: bool

class VehicleOut(BaseModel):
    id: int
    vin: str
    company: str
    status: str | None
    transport_type: str
    cargo_name: str | None
    cargo_weight: str | None
    cargo_size: str | None
    mintrans_permit: bool
    escort_received: bool
    photo: str | None
    created_at: datetime | None = None

    class Config:
        from_attributes = True
