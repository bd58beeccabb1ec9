from fastapi import APIRouter, Depends, File, UploadFile
from sqlalchemy.orm import Session
from fleet.api.deps import db, current_user
from fleet.core.errors import VehicleNotFound
from fleet.schemas.auth import OkOut
from fleet.schemas.vehicle import VehicleCreate, VehicleOut, StatusUpdate, MintransUpdate, FlagsUpdate
from fleet.services.vehicles import (
    list_vehicles,
    get_vehicle,
    create_vehicle,
    update_status,
    update_mintrans_permit,
    update_flags,
    delete_vehicle,
    attach_photo,
)
from fleet.services.photos import save_photo, remove_photo

router = APIRouter(prefix="/api", tags=["vehicles"])

@router.get("/vehicles", response_model=list[VehicleOut])
def list_all(s: Session = Depends(db), u=Depends(current_user)):
    return list_vehicles(s)

@router.get("/vehicles/{vehicle_id}", response_model=VehicleOut)
def get_one(vehicle_id: int, s: Session = Depends(db), u=Depends(current_user)):
    v = get_vehicle(s, vehicle_id)
    if not v:
        raise VehicleNotFound()
    return v

@router.post("/vehicles", response_model=VehicleOut)
def create(body: VehicleCreate, s: Session = Depends(db), u=Depends(current_user)):
    return create_vehicle(s, body)

@router.post("/update-status", response_model=OkOut)
def set_status(body: StatusUpdate, s: Session = Depends(db), u=Depends(current_user)):
    update_status(s, body.id, body.status)
    return {"ok": True}

@router.post("/update-mintrans", response_model=OkOut)
def set_mintrans(body: MintransUpdate, s: Session = Depends(db), u=Depends(current_user)):
    update_mintrans_permit(s, body.id, body.value)
    return {"ok": True}

@router.post("/update-flags", response_model=OkOut)
def set_flags(body: FlagsUpdate, s: Session = Depends(db), u=Depends(current_user)):
    update_flags(s, body.id, body.mintrans_permit, body.escort_received)
    return {"ok": True}

@router.delete("/vehicles/{vehicle_id}", response_model=OkOut)
def remove(vehicle_id: int, s: Session = Depends(db), u=Depends(current_user)):
    delete_vehicle(s, vehicle_id)
    return {"ok": True}

@router.post("/upload/{vehicle_id}", response_model=OkOut)
def upload(
    vehicle_id: int,
    photo: UploadFile = File(...),
    s: Session = Depends(db),
    u=Depends(current_user),
):
    name = save_photo(photo)
    try:
        attached = attach_photo(s, vehicle_id, name)
    except Exception:
        remove_photo(name)
        raise
    if not attached:
        remove_photo(name)
    return {"ok": True}
