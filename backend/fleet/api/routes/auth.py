from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from fleet.api.deps import db
from fleet.schemas.auth import RegisterIn, LoginIn, TokenOut, OkOut
from fleet.services import auth

router = APIRouter(prefix="/api", tags=["auth"])

@router.post("/register", response_model=OkOut)
def register(body: RegisterIn, s: Session = Depends(db)):
    auth.register(s, body.username, body.password)
    return {"ok": True}

@router.post("/login", response_model=TokenOut)
def login(body: LoginIn, s: Session = Depends(db)):
    return {"token": auth.login(s, body.username, body.password)}
