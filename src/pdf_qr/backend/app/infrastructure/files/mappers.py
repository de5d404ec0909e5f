from datetime import datetime, timezone

from pdf_qr.backend.app.domain.files import FileRecord
from pdf_qr.backend.app.infrastructure.db.models.file_record import FileRecordModel


def _as_utc(value: datetime) -> datetime:
    # sqlite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def file_record_model_to_domain(m: FileRecordModel) -> FileRecord:
    return FileRecord(
        id=m.id,
        original_name=m.original_name,
        stored_name=m.stored_name,
        storage_path=m.storage_path,
        file_size=m.file_size,
        mime_type=m.mime_type,
        code_image_path=m.code_image_path,
        upload_date=_as_utc(m.upload_date),
        download_count=m.download_count,
        last_accessed=_as_utc(m.last_accessed),
    )


def file_record_domain_to_model(r: FileRecord) -> FileRecordModel:
    return FileRecordModel(
        id=r.id,
        original_name=r.original_name,
        stored_name=r.stored_name,
        storage_path=r.storage_path,
        file_size=r.file_size,
        mime_type=r.mime_type,
        code_image_path=r.code_image_path,
        upload_date=r.upload_date,
        download_count=r.download_count,
        last_accessed=r.last_accessed or r.upload_date,
    )
