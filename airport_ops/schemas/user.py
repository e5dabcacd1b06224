from pydantic import BaseModel, constr


class LoginRequest(BaseModel):
    username: str
    password: str


class RegisterRequest(BaseModel):
    username: constr(strip_whitespace=True, min_length=3, max_length=100)
    password: constr(min_length=8)


# password hash never leaves the storage layer through this schema
class UserResponse(BaseModel):
    id: int
    username: str

    class Config:
        from_attributes = True


class User(UserResponse):
    password: str
