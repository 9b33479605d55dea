from typing import Optional

from pydantic import BaseModel, ConfigDict

class UserBase(BaseModel):
    user_login : str
    user_password : str

class UserAuth(UserBase):
    pass

class UserOut(BaseModel):
    user_id : int
    username : str
    email : Optional[str] = None
    role : int
    first_name : Optional[str] = None
    last_name : Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
