"""
User management endpoints.

Listing and deletion are admin-only; reading and updating an account is
allowed for the account owner or an admin.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from modules.auth.interfaces import IAccountService
from modules.auth.models import MessageResponse, UpdateUserRequest, UserPublic
from modules.auth.policies import allow_self_or_admin
from shared.models import AuthenticatedUser, Role
from ..dependencies import get_account_service
from ..middleware.auth import enforce_policy, require_roles

router = APIRouter()


@router.get("", response_model=list[UserPublic])
async def list_users(
    user: AuthenticatedUser = Depends(require_roles(Role.ADMIN)),
    service: IAccountService = Depends(get_account_service),
) -> list[UserPublic]:
    """List every account. Admin only."""
    return await service.get_all()


@router.get(
    "/{user_id}",
    response_model=UserPublic,
    responses={404: {"description": "User not found"}},
)
async def get_user(
    user_id: str,
    user: AuthenticatedUser = Depends(require_roles(Role.USER, Role.ADMIN)),
    service: IAccountService = Depends(get_account_service),
):
    """Get one account. Users may only read their own."""
    enforce_policy(allow_self_or_admin, user, user_id, "read")
    found = await service.get_one(user_id)
    if found is None:
        return JSONResponse(status_code=404, content={"error": "User not found"})
    return found


@router.put("/{user_id}", response_model=UserPublic)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    user: AuthenticatedUser = Depends(require_roles(Role.USER, Role.ADMIN)),
    service: IAccountService = Depends(get_account_service),
) -> UserPublic:
    """
    Update an account.

    Only the fields present in the body change; a new password is hashed.
    """
    return await service.update(user_id, request, user.id, user.role)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    user: AuthenticatedUser = Depends(require_roles(Role.ADMIN)),
    service: IAccountService = Depends(get_account_service),
) -> MessageResponse:
    """Delete an account. Admin only."""
    await service.delete(user_id, user.role)
    return MessageResponse(message="User deleted successfully")
