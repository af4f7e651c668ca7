# simlog_app/dependencies.py
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from simlog_app import config
from simlog_app.storage import SimLogStore

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="login")


def get_store(request: Request) -> SimLogStore:
    return request.app.state.store


def get_current_user(token: str = Depends(oauth2_scheme)):
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
        name: str = payload.get("sub")
        role: str = payload.get("role", "").lower()

        if name is None or not role:
            raise credentials_exception

        return {"name": name, "role": role}
    except JWTError:
        raise credentials_exception


def require_role(*roles):
    def role_checker(user: dict = Depends(get_current_user)):
        if user["role"] not in roles:
            raise HTTPException(status_code=403, detail="Unauthorized for this role")
        return user
    return role_checker
