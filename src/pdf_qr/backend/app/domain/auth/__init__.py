from pdf_qr.backend.app.domain.auth.entities import Session
from pdf_qr.backend.app.domain.auth.errors import (
    MissingCredentials,
    InvalidCredentialsError,
    NotAuthenticated,
)
from pdf_qr.backend.app.domain.auth.repositories import SessionStore

__all__ = ['Session', 'SessionStore', 'MissingCredentials', 'InvalidCredentialsError', 'NotAuthenticated']
