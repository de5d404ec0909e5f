from pdf_qr.backend.app.api.v1.auth.schemas import LoginRequest, LoginResponse
from pdf_qr.backend.app.application.auth import LoginInputDTO, LoginOutputDTO


def login_request_to_input_dto(data: LoginRequest) -> LoginInputDTO:
    return LoginInputDTO(
        username=data.username or "",
        password=data.password or "",
    )


def login_output_to_response(result: LoginOutputDTO) -> LoginResponse:
    return LoginResponse(
        success=True,
        message="Logged in",
        session_id=result.token,
        expires_at=result.expires_at,
    )
