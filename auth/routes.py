# src/auth/routes.py
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auth.models import User
from auth.schemas import LoginResponse, LoginUser, UserLogin, UserResponse
from auth.services import AuthService, InactiveUserError
from database import get_storage
from storage.base import Storage

router = APIRouter(prefix="/api/auth", tags=["auth"])
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    storage: Storage = Depends(get_storage),
) -> User:
    """Retrieve the current authenticated user."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user_id = AuthService.decode_access_token(credentials.credentials)
    if user_id is None:
        raise credentials_exception
    user = await storage.get_user(user_id)
    if user is None or not user.is_active:
        raise credentials_exception
    return user


def _login_failed(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"success": False, "message": message},
    )


@router.post("/login", response_model=LoginResponse)
async def login(credentials: UserLogin, request: Request, storage: Storage = Depends(get_storage)):
    """Check the credentials, record the login and return a JWT token."""
    ip_address = request.client.host if request.client else None
    user_agent = request.headers.get("user-agent")
    try:
        user = await AuthService.login(credentials.username, credentials.password, ip_address, user_agent, storage)
    except InactiveUserError:
        return _login_failed("Account is disabled")
    if not user:
        return _login_failed("Invalid credentials")

    access_token = AuthService.create_access_token(data={"sub": user.id})
    return LoginResponse(
        user=LoginUser(
            id=user.id,
            username=user.username,
            email=user.email,
            role=user.role,
            permissions=user.permissions,
        ),
        access_token=access_token,
    )


@router.get("/me", response_model=UserResponse)
async def read_users_me(current_user: User = Depends(get_current_user)):
    """Get the current user details."""
    return UserResponse.from_model(current_user)
