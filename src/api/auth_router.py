"""
Vendor account endpoints: register, sign in/out, session, forgot password.
"""
from fastapi import APIRouter, Body, Depends, HTTPException

from src.api.dependencies import (
    get_auth_controller,
    get_credential_store,
    get_password_reset_service,
)
from src.error_handler import ErrorHandler
from src.marketplace.controllers.auth_controller import AuthController
from src.marketplace.credential_store import CredentialStore
from src.marketplace.password_reset import PasswordResetService
from src.marketplace.validation import FormValidationError

api = APIRouter(prefix="/auth", tags=["Auth"])
error_handler = ErrorHandler()


def _validation_error(e: FormValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail=error_handler.validation_payload(e.field_errors, e.message))


@api.post("/register", status_code=201)
async def register(payload: dict = Body(...), controller: AuthController = Depends(get_auth_controller)):
    try:
        vendor = controller.sign_up(payload)
    except FormValidationError as e:
        raise _validation_error(e)
    return {"authenticated": True, "vendor": vendor.model_dump(mode="json")}


@api.post("/sign-in")
async def sign_in(payload: dict = Body(...), controller: AuthController = Depends(get_auth_controller)):
    try:
        vendor = controller.sign_in(payload)
    except FormValidationError as e:
        raise _validation_error(e)
    return {"authenticated": True, "vendor": vendor.model_dump(mode="json")}


@api.post("/sign-out")
async def sign_out(controller: AuthController = Depends(get_auth_controller)):
    controller.sign_out()
    return {"authenticated": False}


@api.get("/session")
async def current_session(credentials: CredentialStore = Depends(get_credential_store)):
    vendor = credentials.current_vendor
    return {
        "authenticated": vendor is not None,
        "vendor": vendor.model_dump(mode="json") if vendor else None,
    }


@api.post("/forgot-password")
async def forgot_password(payload: dict = Body(...), service: PasswordResetService = Depends(get_password_reset_service)):
    try:
        return await service.request_reset(payload.get("email"))
    except FormValidationError as e:
        raise _validation_error(e)
