from __future__ import annotations

from typing import Any, Dict, Optional

from .base import IDomain


class UserPayload:
    """Caller-supplied profile fields for create and update.

    ``referral_id=None`` means the account has no referral. An empty string is
    a present value and is stored as such.
    """

    def __init__(
        self,
        pseudo: str,
        user_name: str,
        avatar_url: str,
        referral_id: Optional[str] = None,
    ) -> None:
        self.pseudo = pseudo
        self.user_name = user_name
        self.avatar_url = avatar_url
        self.referral_id = referral_id


class User(IDomain):
    def __init__(
        self,
        id: str,
        pseudo: str,
        user_name: str,
        avatar_url: str,
        referral_id: Optional[str],
        created_at: float,
        updated_at: float,
    ) -> None:
        self.id = id
        self.pseudo = pseudo
        self.user_name = user_name
        self.avatar_url = avatar_url
        self.referral_id = referral_id
        self.created_at = created_at
        self.updated_at = updated_at

    @classmethod
    def from_payload(cls, user_id: str, payload: UserPayload, now: float) -> User:
        return cls(
            id=user_id,
            pseudo=payload.pseudo,
            user_name=payload.user_name,
            avatar_url=payload.avatar_url,
            referral_id=payload.referral_id,
            created_at=now,
            updated_at=now,
        )

    def replace(self, payload: UserPayload, now: float) -> None:
        """Overwrite every profile field; ``id`` and ``created_at`` stay."""
        self.pseudo = payload.pseudo
        self.user_name = payload.user_name
        self.avatar_url = payload.avatar_url
        self.referral_id = payload.referral_id
        self.updated_at = max(now, self.updated_at)

    def copy(self) -> User:
        return User(**self.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "pseudo": self.pseudo,
            "user_name": self.user_name,
            "avatar_url": self.avatar_url,
            "referral_id": self.referral_id,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, pseudo={self.pseudo!r})"
