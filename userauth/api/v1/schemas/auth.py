from userauth.core.schemas import BaseSchema


class SignInRequest(BaseSchema):
    email: str
    password: str


class RegisterRequest(SignInRequest):
    pass


class SignInResponse(BaseSchema):
    access_token: str
    token_type: str = "Bearer"
