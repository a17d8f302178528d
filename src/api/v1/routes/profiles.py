"""Profile API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import (
    ProfileDetailResponse,
    ProfileListResponse,
    ProfilePayload,
    ProfileResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Profile not found"}}
_INVALID = {400: {"model": ErrorResponse, "description": "Empty username or bio"}}


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List all profiles",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get every stored profile, ordered by ID."""
    profiles = await service.list_profiles()
    return ProfileListResponse(
        data=[ProfileResponse.model_validate(profile) for profile in profiles]
    )


@router.get(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile",
    responses=_NOT_FOUND,
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    profile_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get a single profile by ID."""
    profile = await service.get_profile(profile_id)
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.post(
    "",
    response_model=ProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a profile",
    responses=_INVALID,
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_profile(
    request: Request,
    body: ProfilePayload,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Create a profile with no followers and not following anyone."""
    profile = await service.create_profile(username=body.username, bio=body.bio)
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.put(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Update a profile",
    responses={**_NOT_FOUND, **_INVALID},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    profile_id: str,
    body: ProfilePayload,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Replace a profile's username and bio. Relationships are kept."""
    profile = await service.update_profile(
        profile_id=profile_id,
        username=body.username,
        bio=body.bio,
    )
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.delete(
    "/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Delete a profile",
    responses=_NOT_FOUND,
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request,
    profile_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Delete a profile and return it.

    References to the deleted profile in other profiles' follower and
    following lists are left in place.
    """
    profile = await service.delete_profile(profile_id)
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.post(
    "/{user_id}/following/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Follow a profile",
    responses=_NOT_FOUND,
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def follow_profile(
    request: Request,
    user_id: str,
    profile_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Make `user_id` follow `profile_id`. Idempotent.

    Returns the follower's profile. The target's follower list is updated in
    a separate write; if the target does not exist that write is skipped.
    """
    profile = await service.follow_profile(user_id, profile_id)
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))


@router.delete(
    "/{user_id}/following/{profile_id}",
    response_model=ProfileDetailResponse,
    summary="Unfollow a profile",
    responses=_NOT_FOUND,
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def unfollow_profile(
    request: Request,
    user_id: str,
    profile_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Make `user_id` stop following `profile_id`. No-op if not following."""
    profile = await service.unfollow_profile(user_id, profile_id)
    return ProfileDetailResponse(data=ProfileResponse.model_validate(profile))
