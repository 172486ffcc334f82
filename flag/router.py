from typing import Optional

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from flag.models import FlagRequest
from flag.service import receive_flag

router = APIRouter(tags=["Flag"])


@router.put("/flag", response_class=PlainTextResponse)
def submit_flag(data: Optional[FlagRequest] = None):
    data = data or FlagRequest()
    return receive_flag(data.flag)
