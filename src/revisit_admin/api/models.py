"""Request and response models for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from revisit_admin.domain.sessions import SessionIdentity, identity_to_snapshot
from revisit_admin.services.notifications import Notification


class LoginRequest(BaseModel):
    email: str
    password: str


class SignupRequest(BaseModel):
    name: str
    email: str
    password: str
    confirm_password: str = Field(alias="confirmPassword")

    model_config = ConfigDict(populate_by_name=True)


class CategoryFormRequest(BaseModel):
    """Raw category form fields; validation happens in the form service."""

    name: str = ""
    item_count: str = Field(default="", alias="itemCount")
    image_url: str = Field(default="", alias="imageUrl")
    image_preview: str = Field(default="", alias="imagePreview")

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


def session_payload(user: SessionIdentity | None) -> dict[str, object]:
    if user is None:
        return {"authenticated": False, "user": None}
    return {"authenticated": True, "user": identity_to_snapshot(user)}


def notification_payload(notification: Notification) -> dict[str, str]:
    return {
        "message": notification.message,
        "severity": notification.severity.value,
        "created_at": notification.created_at.isoformat(),
    }
