from pdf_qr.backend.app.application.auth.dto import LoginInputDTO, LoginOutputDTO, SessionDTO

__all__ = ['LoginInputDTO', 'LoginOutputDTO', 'SessionDTO']
