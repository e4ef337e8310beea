from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.api.responses import success
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthContext
from src.app.use_cases.recipes import CreateRecipeCommand, CreateRecipeUseCase
from src.depends import get_current_auth, get_unit_of_work

router = APIRouter(prefix="/recipes", tags=["Recipe"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(
    request: CreateRecipeCommand,
    auth: AuthContext = Depends(get_current_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Recipe

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 422 Unprocessable Entity: Invalid fields or unknown family_id
    """
    result = await CreateRecipeUseCase(uow).execute(auth.user_id, request)
    if result.is_err():
        raise_for_error(result.error)

    return success("Recipe created successfully", result.value)
