"""Profile update helper endpoint.

POST /profile/patch → minimal PATCH payload for the user API (409 if empty)
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from traveltribe.domain.profile import NoProfileChanges, build_profile_patch
from traveltribe.observability.logging import get_logger, log_event

logger = get_logger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


class ProfilePatchRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    form: dict[str, Any]
    stored: dict[str, Any] = Field(default_factory=dict)
    is_password_changed: bool = Field(default=False, alias="isPasswordChanged")


@router.post("/patch")
def profile_patch(body: ProfilePatchRequest) -> dict:
    try:
        changes = build_profile_patch(
            body.form, body.stored, password_changed=body.is_password_changed
        )
    except NoProfileChanges as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    log_event(logger, "profile patch built", fields=sorted(changes))
    return {"changes": changes}
