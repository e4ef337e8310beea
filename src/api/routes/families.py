from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, raise_for_error
from src.api.responses import success
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthContext
from src.app.use_cases.families import (
    AcceptInvitationUseCase,
    CreateFamilyUseCase,
    DeleteFamilyUseCase,
    InviteMemberUseCase,
    LeaveFamilyUseCase,
    ListFamiliesUseCase,
    RemoveMemberUseCase,
)
from src.depends import get_current_auth, get_unit_of_work
from src.domain.result import Error

router = APIRouter(prefix="/families", tags=["Family"])


def parse_uuid(value: str, code: str, message: str) -> UUID:
    """Path ids that are not UUIDs cannot match any row, so they are 404s."""
    try:
        return UUID(value)
    except ValueError:
        raise ClientError(
            Error.not_found(code, message), status_code=status.HTTP_404_NOT_FOUND
        )


def parse_family_id(value: str) -> UUID:
    return parse_uuid(value, "FAMILY_NOT_FOUND", "Family not found.")


class CreateFamilyRequest(BaseModel):
    """Create family HTTP request payload"""

    name: str = Field(..., description="Family name (3-255 characters)")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_family(
    request: CreateFamilyRequest,
    auth: AuthContext = Depends(get_current_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Family

    The caller becomes owner and is added to the roster as admin.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 422 Unprocessable Entity: Invalid name
    """
    result = await CreateFamilyUseCase(uow).execute(auth.user_id, request.name)
    if result.is_err():
        raise_for_error(result.error)

    return success("Family created successfully", result.value)


@router.get("", status_code=status.HTTP_200_OK)
async def list_families(
    auth: AuthContext = Depends(get_current_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the caller's families with owner and members"""
    result = await ListFamiliesUseCase(uow).execute(auth.user_id)
    if result.is_err():
        raise_for_error(result.error)

    return success("Families retrieved successfully", result.value)


class InviteMemberRequest(BaseModel):
    """Invite member HTTP request payload"""

    family_id: UUID = Field(..., description="Family to invite into")
    email: Optional[str] = Field(None, description="Address the code is meant for")


@router.post("/invite", status_code=status.HTTP_200_OK)
async def invite_member(
    request: InviteMemberRequest,
    auth: AuthContext = Depends(get_current_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Invite Member

    Returns a single-use invitation code.

    Raises:
        - 403 Forbidden: Caller is not the owner
        - 404 Not Found: Family not found
    """
    result = await InviteMemberUseCase(uow).execute(
        auth.user_id, request.family_id, request.email
    )
    if result.is_err():
        raise_for_error(result.error)

    return success("Invitation created successfully", result.value)


class AcceptInvitationRequest(BaseModel):
    """Accept invitation HTTP request payload"""

    code: str = Field(..., min_length=1, description="Invitation code")


@router.post("/accept-invitation", status_code=status.HTTP_200_OK)
async def accept_invitation(
    request: AcceptInvitationRequest,
    auth: AuthContext = Depends(get_current_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation

    Raises:
        - 404 Not Found: Unknown, used or expired code
    """
    result = await AcceptInvitationUseCase(uow).execute(auth.user_id, request.code)
    if result.is_err():
        raise_for_error(result.error)

    return success("Successfully joined the family", result.value)


@router.delete("/{family_id}", status_code=status.HTTP_200_OK)
async def delete_family(
    family_id: str,
    auth: AuthContext = Depends(get_current_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Family

    Raises:
        - 403 Forbidden: Caller is not the owner
        - 404 Not Found: Family not found
    """
    result = await DeleteFamilyUseCase(uow).execute(
        auth.user_id, parse_family_id(family_id)
    )
    if result.is_err():
        raise_for_error(result.error)

    return success("Family deleted successfully", result.value)


@router.delete("/{family_id}/members/{user_id}", status_code=status.HTTP_200_OK)
async def remove_member(
    family_id: str,
    user_id: str,
    auth: AuthContext = Depends(get_current_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Member

    Raises:
        - 403 Forbidden: Caller is not the owner
        - 404 Not Found: Family or user not found
        - 422 Unprocessable Entity: Target is the owner or not a member
    """
    target_user_id = parse_uuid(user_id, "USER_NOT_FOUND", "User not found.")
    result = await RemoveMemberUseCase(uow).execute(
        auth.user_id, parse_family_id(family_id), target_user_id
    )
    if result.is_err():
        raise_for_error(result.error)

    return success("Member removed successfully", result.value)


@router.post("/{family_id}/leave", status_code=status.HTTP_200_OK)
async def leave_family(
    family_id: str,
    auth: AuthContext = Depends(get_current_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Leave Family

    Raises:
        - 404 Not Found: Family not found
        - 422 Unprocessable Entity: Caller is the owner or not a member
    """
    result = await LeaveFamilyUseCase(uow).execute(
        auth.user_id, parse_family_id(family_id)
    )
    if result.is_err():
        raise_for_error(result.error)

    return success("You have left the family")
