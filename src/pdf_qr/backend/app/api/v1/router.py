from fastapi import APIRouter

from pdf_qr.backend.app.api.v1.auth import router as auth_router
from pdf_qr.backend.app.api.v1.files import router as files_router

api_router = APIRouter()
api_router.include_router(auth_router.router)
api_router.include_router(files_router.admin_router)
api_router.include_router(files_router.router)
