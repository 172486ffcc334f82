from typing import Optional

from fastapi import APIRouter

from auth.models import LoginRequest, LoginResponse
from auth.service import make_token

router = APIRouter(tags=["Auth"])


@router.put("/login", response_model=LoginResponse)
def login(data: Optional[LoginRequest] = None):
    # an empty body logs in as the empty user
    data = data or LoginRequest()
    return {"token": make_token(data.username, data.password)}
