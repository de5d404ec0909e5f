from datetime import datetime
from typing import Optional

from pdf_qr.backend.app.api.v1.schemas import CamelModel


class LoginRequest(CamelModel):
    # empty or missing fields are rejected by the login use case (400)
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(CamelModel):
    success: bool = True
    message: str
    session_id: Optional[str] = None
    expires_at: Optional[datetime] = None


class AuthStatusResponse(CamelModel):
    authenticated: bool = True
