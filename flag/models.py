from pydantic import BaseModel


class FlagRequest(BaseModel):
    flag: str = ""
