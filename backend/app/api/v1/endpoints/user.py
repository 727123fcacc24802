from fastapi import APIRouter, Depends

from app.api.v1.deps import get_current_user
from app.db.models import User
from app.db.schemas import UserOut

router = APIRouter()


@router.get("/me", response_model=UserOut)
def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current user profile"""
    return current_user
