"""Profile API: the caller's own profile and account deletion."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from taskflow.api.v1.dependencies import CurrentUser, get_profile_service
from taskflow.application.use_cases.profile import ProfileService
from taskflow.schemas.common import Envelope, Row, ok
from taskflow.schemas.profile import ProfileUpdateRequest

router = APIRouter()

Service = Annotated[ProfileService, Depends(get_profile_service)]


@router.get("", response_model=Envelope[Row], response_model_exclude_unset=True)
async def get_profile(user: CurrentUser, service: Service) -> Any:
    return ok(await service.get_profile(user.id))


@router.put("", response_model=Envelope[Row], response_model_exclude_unset=True)
@router.patch("", response_model=Envelope[Row], response_model_exclude_unset=True)
async def update_profile(user: CurrentUser, service: Service, body: ProfileUpdateRequest) -> Any:
    """PUT and PATCH share partial-update semantics."""
    profile = await service.update_profile(user.id, body.changes())
    return ok(profile, "Profile updated successfully")


@router.delete("", response_model=Envelope[Any], response_model_exclude_unset=True)
async def delete_account(user: CurrentUser, service: Service) -> Any:
    """Delete the account at the identity provider; owned data cascades."""
    await service.delete_account(user.id)
    return ok(message="Account deleted. Your data has been permanently removed.")
