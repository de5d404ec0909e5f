from pdf_qr.backend.app.infrastructure.db.models.file_record import FileRecordModel

__all__ = ['FileRecordModel']
