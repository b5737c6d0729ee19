from pydantic import BaseModel
from quizhub.schemas.users.user_base import UserOut


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginOut(BaseModel):
    user: UserOut
    token: str
