# simlog_app/auth.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException
from jose import jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from simlog_app import config
from simlog_app.models import Role

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
router = APIRouter()

DEFAULT_NAMES = {
    Role.INSTRUCTOR: "Instructor",
    Role.MAINTENANCE: "Technician",
    Role.ADMIN: "Owner",
}


class RoleLogin(BaseModel):
    role: Role
    name: Optional[str] = None
    passcode: Optional[str] = None


def create_access_token(data: dict):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)


def check_owner_passcode(passcode: Optional[str]) -> bool:
    if not config.OWNER_PASSCODE_HASH:
        return True
    return bool(passcode) and pwd_context.verify(passcode, config.OWNER_PASSCODE_HASH)


# --- Pick a mode: instructor, maintenance or owner dashboard ---
@router.post("/login")
def login(form: RoleLogin):
    if form.role == Role.ADMIN and not check_owner_passcode(form.passcode):
        raise HTTPException(status_code=401, detail="Invalid owner passcode")

    name = (form.name or "").strip() or DEFAULT_NAMES[form.role]
    token = create_access_token({"sub": name, "role": form.role.value})

    return {
        "access_token": token,
        "token_type": "bearer",
        "role": form.role.value,
        "name": name
    }
