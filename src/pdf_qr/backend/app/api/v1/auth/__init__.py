from pdf_qr.backend.app.api.v1.auth.schemas import LoginRequest, LoginResponse, AuthStatusResponse

__all__ = ['LoginRequest', 'LoginResponse', 'AuthStatusResponse']
