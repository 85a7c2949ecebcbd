"""Login, signup and logout endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from revisit_admin.api.models import LoginRequest, SignupRequest, session_payload
from revisit_admin.services.signup_form import SignupForm, validate_signup

if TYPE_CHECKING:
    from revisit_admin.containers import AppContainer

_FORM_ERROR_STATUS = 422

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/session")
async def current_session(request: Request) -> dict[str, object]:
    """Return the signed-in identity, if any."""
    container: AppContainer = request.app.state.container
    return session_payload(container.session_store.user)


@router.post("/login")
async def login(body: LoginRequest, request: Request) -> dict[str, object]:
    """Sign in with email and password."""
    container: AppContainer = request.app.state.container
    if not await container.session_store.login(body.email, body.password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return session_payload(container.session_store.user)


@router.post("/signup")
async def signup(body: SignupRequest, request: Request) -> dict[str, object]:
    """Check the signup form, then create a local account and sign it in."""
    errors = validate_signup(
        SignupForm(
            name=body.name,
            email=body.email,
            password=body.password,
            confirm_password=body.confirm_password,
        )
    )
    if errors:
        raise HTTPException(status_code=_FORM_ERROR_STATUS, detail=errors)
    container: AppContainer = request.app.state.container
    if not await container.session_store.signup(body.name, body.email, body.password):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
    return session_payload(container.session_store.user)


@router.post("/logout")
async def logout(request: Request) -> dict[str, object]:
    """Sign out."""
    container: AppContainer = request.app.state.container
    container.session_store.logout()
    return session_payload(None)
