from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from pdf_qr.backend.app.application.auth import SessionDTO
from pdf_qr.backend.app.application.auth.use_cases import (
    AuthenticateSessionUseCase,
    LoginUseCase,
    LogoutUseCase,
)
from pdf_qr.backend.app.core.deps import ContainerDep

bearer_scheme = HTTPBearer(auto_error=False)


async def get_bearer_token(
        credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> Optional[str]:
    return credentials.credentials if credentials else None


async def get_login_use_case(container: ContainerDep) -> LoginUseCase:
    return LoginUseCase(
        container.admin_credentials,
        container.password_hasher,
        container.session_store,
        session_ttl=container.session_ttl,
        issue_sessions=container.settings.REQUIRE_AUTH,
    )


async def get_logout_use_case(container: ContainerDep) -> LogoutUseCase:
    return LogoutUseCase(container.session_store)


async def get_authenticate_session_use_case(container: ContainerDep) -> AuthenticateSessionUseCase:
    return AuthenticateSessionUseCase(container.session_store)


async def require_admin(
        container: ContainerDep,
        token: Annotated[Optional[str], Depends(get_bearer_token)],
        use_case: Annotated[AuthenticateSessionUseCase, Depends(get_authenticate_session_use_case)],
) -> Optional[SessionDTO]:
    """Session gate for administrative routes; a no-op when REQUIRE_AUTH is off."""
    if not container.settings.REQUIRE_AUTH:
        return None
    return await use_case.execute(token)
