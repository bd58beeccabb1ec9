"""Vehicle record operations.

Every function issues one statement against the session and commits.
Updates and deletes aimed at an id that does not exist touch no rows and
are not treated as errors; they return the affected row count instead.
"""
from __future__ import annotations

import logging

from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session

from fleet.models.vehicle import Vehicle
from fleet.schemas.vehicle import VehicleCreate

logger = logging.getLogger(__name__)


def list_vehicles(s: Session) -> list[Vehicle]:
    return list(s.execute(select(Vehicle).order_by(Vehicle.id.desc())).scalars().all())


def get_vehicle(s: Session, vehicle_id: int) -> Vehicle | None:
    return s.execute(select(Vehicle).where(Vehicle.id == vehicle_id)).scalar_one_or_none()


def create_vehicle(s: Session, body: VehicleCreate) -> Vehicle:
    v = Vehicle(
        vin=body.vin,
        company=body.company,
        status=body.status,
        transport_type=body.transport_type or "regular",
        cargo_name=body.cargo_name or None,
        cargo_weight=body.cargo_weight or None,
        cargo_size=body.cargo_size or None,
        mintrans_permit=bool(body.mintrans_permit),
        escort_received=bool(body.escort_received),
    )
    s.add(v)
    s.commit()
    s.refresh(v)
    logger.info("vehicle %s created (vin=%s, company=%s)", v.id, v.vin, v.company)
    return v


def _update(s: Session, vehicle_id: int, **values) -> int:
    res = s.execute(
        update(Vehicle)
        .where(Vehicle.id == vehicle_id)
        .values(**values)
        .execution_options(synchronize_session=False)
    )
    s.commit()
    if not res.rowcount:
        logger.debug("vehicle %s not found, %s unchanged", vehicle_id, ", ".join(values))
    return res.rowcount


def update_status(s: Session, vehicle_id: int, status: str | None) -> int:
    return _update(s, vehicle_id, status=status)


def update_mintrans_permit(s: Session, vehicle_id: int, value: bool) -> int:
    return _update(s, vehicle_id, mintrans_permit=value)


def update_flags(s: Session, vehicle_id: int, mintrans_permit: bool, escort_received: bool) -> int:
    return _update(s, vehicle_id, mintrans_permit=mintrans_permit, escort_received=escort_received)


def attach_photo(s: Session, vehicle_id: int, photo: str) -> int:
    return _update(s, vehicle_id, photo=photo)


def delete_vehicle(s: Session, vehicle_id: int) -> int:
    res = s.execute(
        delete(Vehicle).where(Vehicle.id == vehicle_id).execution_options(synchronize_session=False)
    )
    s.commit()
    if res.rowcount:
        logger.info("vehicle %s deleted", vehicle_id)
    else:
        logger.debug("vehicle %s not found, nothing deleted", vehicle_id)
    return res.rowcount
