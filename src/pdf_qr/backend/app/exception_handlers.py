import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pdf_qr.backend.app.domain.auth import InvalidCredentialsError, MissingCredentials, NotAuthenticated
from pdf_qr.backend.app.domain.files.errors import (
    CodeImageMissing,
    DuplicateFileId,
    FailedToDeleteFile,
    FailedToStoreUpload,
    FileRecordNotFound,
    FileTooLarge,
    NoFilesUploaded,
    StoredFileMissing,
    TooManyFiles,
    UnsupportedFileType,
)

logger = logging.getLogger(__name__)

VALIDATION_ERRORS = (NoFilesUploaded, TooManyFiles, UnsupportedFileType, FileTooLarge)


def describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_error(_: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": describe_validation_errors(exc)},
        )

    @app.exception_handler(MissingCredentials)
    async def missing_credentials(_: Request, __: MissingCredentials):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": "Username and password are required"},
        )

    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials(_: Request, __: InvalidCredentialsError):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"success": False, "detail": "Invalid username or password"},
        )

    @app.exception_handler(NotAuthenticated)
    async def not_authenticated(_: Request, __: NotAuthenticated):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": "Authentication required", "needLogin": True},
            headers={"WWW-Authenticate": "Bearer"},
        )

    async def invalid_upload(_: Request, exc: Exception):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    for error_type in VALIDATION_ERRORS:
        app.add_exception_handler(error_type, invalid_upload)

    @app.exception_handler(FileRecordNotFound)
    async def file_not_found(_: Request, __: FileRecordNotFound):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "File not found"},
        )

    @app.exception_handler(StoredFileMissing)
    async def stored_file_missing(_: Request, __: StoredFileMissing):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "File not found on server"},
        )

    @app.exception_handler(CodeImageMissing)
    async def code_image_missing(_: Request, __: CodeImageMissing):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "QR code not found"},
        )

    @app.exception_handler(DuplicateFileId)
    async def duplicate_file_id(_: Request, exc: DuplicateFileId):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc)},
        )

    @app.exception_handler(FailedToStoreUpload)
    async def failed_to_store_upload(_: Request, exc: FailedToStoreUpload):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc) or "Failed to store upload"},
        )

    @app.exception_handler(FailedToDeleteFile)
    async def failed_to_delete_file(_: Request, exc: FailedToDeleteFile):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception(_: Request, exc: Exception):
        logger.exception("Unhandled exception", exc_info=exc)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error"
            },
        )
