"""User profile routes.

All routes act on the authenticated caller's own profile; the profile id
is always the bearer token subject.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import ConfigDict

from uniflow.application.usecase.profile import (
    GetProfileUseCase,
    SaveProfileUseCase,
    UpdateProfileUseCase,
)
from uniflow.application.usecase.profile.common import ProfileResponse, to_profile_key
from uniflow.application.usecase.profile.get_profile import GetProfileRequest
from uniflow.application.usecase.profile.save_profile import SaveProfileRequest
from uniflow.application.usecase.profile.update_profile import UpdateProfileRequest
from uniflow.domain.model import Principal
from uniflow.domain.value import ProfileFields
from uniflow.interface.api.auth import require_principal

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)


class ProfileAPIRequest(ProfileFields):
    """API request body for writing profile fields (camelCase keys).

    Same allow-list and limits as ``ProfileFields``; unknown keys are
    rejected and client-specific data belongs in ``extensions``.
    """

    model_config = ConfigDict(alias_generator=to_profile_key, populate_by_name=True)

    def to_fields(self) -> ProfileFields:
        """Keep only the keys the client actually sent."""
        return ProfileFields(**self.model_dump(exclude_unset=True))


@router.post("", response_model=ProfileResponse)
async def save_my_profile(
    request: ProfileAPIRequest,
    save_profile_use_case: FromDishka[SaveProfileUseCase],
    principal: Principal = Depends(require_principal),
) -> ProfileResponse:
    """Create the caller's profile or merge fields into it.

    Example:
        POST /api/users
        Authorization: Bearer <Firebase ID token>

        Request:
        {"displayName": "Ada", "university": "ETH", "graduationYear": 2026}

        Response:
        {
            "success": true,
            "user": {
                "id": "firebase-uid",
                "displayName": "Ada",
                "university": "ETH",
                "graduationYear": 2026,
                "createdAt": "...",
                "updatedAt": "..."
            }
        }
    """
    return await save_profile_use_case.execute(
        SaveProfileRequest(account_id=principal.account_id, fields=request.to_fields())
    )


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(
    get_profile_use_case: FromDishka[GetProfileUseCase],
    principal: Principal = Depends(require_principal),
) -> ProfileResponse:
    """Return the caller's profile, or 404 if none was saved yet."""
    return await get_profile_use_case.execute(
        GetProfileRequest(account_id=principal.account_id)
    )


@router.put("/me", response_model=ProfileResponse)
async def update_my_profile(
    request: ProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    principal: Principal = Depends(require_principal),
) -> ProfileResponse:
    """Merge fields into the caller's existing profile; 404 if there is none."""
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            account_id=principal.account_id, fields=request.to_fields()
        )
    )
