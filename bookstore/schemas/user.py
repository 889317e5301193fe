"""
Bookstore Backend — User Schemas
==================================

`UserSchema` doubles as the PUT /user request body and as the public
representation of a user; the password hash never leaves the service layer.
"""

from bookstore.schemas.common import ApiModel, Int32


class UserSchema(ApiModel):
    id: Int32
    email: str
    username: str


class RegisterRequest(ApiModel):
    email: str
    password: str
    username: str


class LoginRequest(ApiModel):
    email: str
    password: str


class LoginResponse(ApiModel):
    user: UserSchema
    # Placeholder, not a credential (see bookstore.security.issue_token)
    token: str
