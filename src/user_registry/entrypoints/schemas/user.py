from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from user_registry.domain.user import User, UserPayload


class UserCreateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pseudo: str = Field(..., description="Display handle")
    user_name: str = Field(..., alias="userName", description="Account name")
    avatar_url: str = Field(..., alias="avatarURL", description="Avatar URL")
    referral_id: Optional[str] = Field(default=None, alias="referralId", description="Referral id, if any")

    def to_payload(self) -> UserPayload:
        return UserPayload(
            pseudo=self.pseudo,
            user_name=self.user_name,
            avatar_url=self.avatar_url,
            referral_id=self.referral_id,
        )


class UserUpdateRequest(UserCreateRequest):
    pass


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    pseudo: str
    user_name: str = Field(..., alias="userName")
    avatar_url: str = Field(..., alias="avatarURL")
    referral_id: Optional[str] = Field(default=None, alias="referralId")
    created_at: float = Field(..., alias="createdAt")
    updated_at: float = Field(..., alias="updatedAt")

    @classmethod
    def from_user(cls, user: User) -> UserResponse:
        return cls(**user.to_dict())


class UserListResponse(BaseModel):
    users: List[UserResponse] = Field(default_factory=list)
