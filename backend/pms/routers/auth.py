"""Auth router - placeholder email login, registration and profile."""

from fastapi import APIRouter, Depends, status

from pms.core.security import get_current_user
from pms.models import User
from pms.routers.deps import get_user_service
from pms.schemas.auth import LoginRequest, ProfileUpdate, RegisterRequest, SocialLoginRequest
from pms.services.users import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=User)
async def login(data: LoginRequest, users: UserService = Depends(get_user_service)):
    """Look an account up by email.

    Returns the user; later requests identify themselves with the
    ``X-User-Email`` header (or a bearer token under the firebase provider).
    """
    return users.login(data.email)


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
async def register(data: RegisterRequest, users: UserService = Depends(get_user_service)):
    return users.register(
        name=data.name,
        email=data.email,
        password=data.password,
        role=data.role,
        phone=data.phone,
    )


@router.post("/social", response_model=User)
async def social_login(data: SocialLoginRequest, users: UserService = Depends(get_user_service)):
    """Simulated social sign-in."""
    return users.social_login(data.provider)


@router.get("/me", response_model=User)
async def get_me(current_user: User = Depends(get_current_user)):
    return current_user


@router.patch("/me", response_model=User)
async def update_me(
    data: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
):
    """Update the caller's name or phone."""
    return users.update_profile(current_user, name=data.name, phone=data.phone)
