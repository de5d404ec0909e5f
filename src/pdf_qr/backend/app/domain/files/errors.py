class NoFilesUploaded(Exception):
    def __init__(self):
        super().__init__("No files were uploaded")


class TooManyFiles(Exception):
    def __init__(self, max_files: int):
        self.max_files = max_files
        super().__init__(f"At most {max_files} files can be uploaded at once")


class UnsupportedFileType(Exception):
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Only PDF files are accepted ({filename})")


def format_size(num_bytes: int) -> str:
    size = float(num_bytes)
    for unit in ("bytes", "KB", "MB"):
        if size < 1024:
            return f"{size:.4g} {unit}"
        size /= 1024
    return f"{size:.4g} GB"


class FileTooLarge(Exception):
    def __init__(self, filename: str, max_bytes: int):
        self.filename = filename
        self.max_bytes = max_bytes
        super().__init__(f"File {filename} is too large (max {format_size(max_bytes)})")


class FileRecordNotFound(Exception):
    def __init__(self, file_id: str):
        self.file_id = file_id
        super().__init__(f"File with id {file_id} not found.")


class StoredFileMissing(Exception):
    def __init__(self, file_id: str):
        self.file_id = file_id
        super().__init__(f"File with id {file_id} not found on server.")


class CodeImageMissing(Exception):
    def __init__(self, file_id: str):
        self.file_id = file_id
        super().__init__(f"QR code for file {file_id} not found.")


class DuplicateFileId(Exception):
    def __init__(self, file_id: str):
        self.file_id = file_id
        super().__init__(f"File id {file_id} already exists.")


class FailedToStoreUpload(Exception):
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"Failed to store uploaded file {filename}")


class FailedToDeleteFile(Exception):
    def __init__(self, file_id: str):
        self.file_id = file_id
        super().__init__(f"Failed to delete file with id {file_id}")
