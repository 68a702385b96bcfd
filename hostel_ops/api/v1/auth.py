"""
Authentication endpoints: registration, login and profile.
"""
from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm

from hostel_ops.api.deps import get_auth_service, get_current_principal
from hostel_ops.schemas.auth import TokenResponse
from hostel_ops.schemas.user import RegisterRequest, UserResponse
from hostel_ops.services.auth_service import AuthService
from hostel_ops.services.permissions import Principal

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
):
    """Create a student account."""
    return UserResponse.from_model(service.register_student(request))


@router.post("/login", response_model=TokenResponse)
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    service: AuthService = Depends(get_auth_service),
):
    """Exchange e-mail (``username`` form field) and password for a bearer token."""
    token, expires_in, user = service.login(form_data.username, form_data.password)
    return TokenResponse(
        access_token=token,
        expires_in=expires_in,
        user=UserResponse.from_model(user),
    )


@router.get("/me", response_model=UserResponse)
def read_me(
    principal: Principal = Depends(get_current_principal),
    service: AuthService = Depends(get_auth_service),
):
    return UserResponse.from_model(service.get_profile(principal))
