from pdf_qr.backend.app.core.config import Settings, get_settings
from pdf_qr.backend.app.core.deps import AppContainer, build_container, get_uow
from pdf_qr.backend.app.core.security import BcryptPasswordHasher

__all__ = ['Settings',
           'get_settings',
           'AppContainer',
           'build_container',
           'BcryptPasswordHasher',
           'get_uow']
