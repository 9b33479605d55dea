from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer, OAuth2PasswordRequestForm
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.database import get_db
from ..core.exceptions import EventNotFoundError
from ..core.security import UserRole, check_password, issue_token, read_token
from ..models.auth import User
from ..repositories.flight_schedule_repository import FlightScheduleRepository
from ..schemas.auth import UserAuth, UserOut


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/token_only")

auth = APIRouter(prefix="/auth", tags=["auth"])


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def authenticate_user(db: Session, credentials: UserAuth):
    """Пользователь по логину и паролю или None"""
    user = db.execute(
        select(User).where(User.username == credentials.user_login)
    ).scalar_one_or_none()
    if user is None or not check_password(credentials.user_password, user.password):
        return None
    return user


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    db: Session = Depends(get_db),
) -> User:
    user_id = read_token(token)
    user = db.get(User, user_id) if user_id is not None else None
    if user is None:
        raise _unauthorized("Could not validate credentials")
    return user


async def require_event_access(
    event_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Session = Depends(get_db),
) -> User:
    """
    Доступ к расписанию мероприятия.

    Администратор видит любое мероприятие, оператор только те, к которым
    привязан. Несуществующее мероприятие дает 404 раньше проверки доступа.
    """
    repository = FlightScheduleRepository(db)
    if not repository.event_exists(event_id):
        raise EventNotFoundError(event_id)

    role = current_user.role
    if role >= UserRole.admin:
        return current_user
    if role < UserRole.operator or not repository.is_event_member(event_id, current_user.user_id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have access to this event",
        )
    return current_user


@auth.get("", response_model=UserOut)
async def get_user_data(current_user: Annotated[User, Depends(get_current_user)]):
    return current_user


@auth.post("/token_only", response_model=Token)
async def login_for_access_token(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    db: Session = Depends(get_db),
):
    credentials = UserAuth(user_login=form_data.username, user_password=form_data.password)
    user = authenticate_user(db, credentials)
    if user is None:
        raise _unauthorized("Incorrect username or password")
    return Token(access_token=issue_token(user.user_id))
