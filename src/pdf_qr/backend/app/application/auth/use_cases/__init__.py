from .login import LoginUseCase
from .logout import LogoutUseCase
from .authenticate_session import AuthenticateSessionUseCase

__all__ = [
    "LoginUseCase",
    "LogoutUseCase",
    "AuthenticateSessionUseCase",
]
