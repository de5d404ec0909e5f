from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, Body, Depends

from pdf_qr.backend.app.api.v1.auth.deps import (
    get_bearer_token,
    get_login_use_case,
    get_logout_use_case,
    require_admin,
)
from pdf_qr.backend.app.api.v1.auth.mappers import login_request_to_input_dto, login_output_to_response
from pdf_qr.backend.app.api.v1.auth.schemas import AuthStatusResponse, LoginRequest, LoginResponse
from pdf_qr.backend.app.api.v1.schemas import MessageResponse
from pdf_qr.backend.app.application.auth import SessionDTO
from pdf_qr.backend.app.application.auth.use_cases import LoginUseCase, LogoutUseCase

router = APIRouter(tags=["auth"])

login_dep = Annotated[LoginUseCase, Depends(get_login_use_case)]
logout_dep = Annotated[LogoutUseCase, Depends(get_logout_use_case)]
admin_dep = Annotated[Optional[SessionDTO], Depends(require_admin)]
token_dep = Annotated[Optional[str], Depends(get_bearer_token)]


@router.post("/login", response_model=LoginResponse, response_model_exclude_none=True)
async def login(
        use_case: login_dep,
        payload: Annotated[Optional[LoginRequest], Body()] = None,
) -> LoginResponse:
    input_dto = login_request_to_input_dto(payload or LoginRequest())
    result = await use_case.execute(input_dto)
    return login_output_to_response(result)


@router.post("/logout", response_model=MessageResponse)
async def logout(_: admin_dep, token: token_dep, use_case: logout_dep) -> MessageResponse:
    await use_case.execute(token)
    return MessageResponse(message="Logged out")


@router.get("/check-auth", response_model=AuthStatusResponse)
async def check_auth(_: admin_dep) -> AuthStatusResponse:
    return AuthStatusResponse(authenticated=True)
