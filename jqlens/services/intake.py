import logging
from dataclasses import dataclass
from pathlib import Path

from starlette.datastructures import FormData, UploadFile

from jqlens.core.errors import InvalidFileType, MissingFile, UnexpectedFile
from jqlens.storage.temp_store import UPLOAD_SUFFIX, TempFileStore

logger = logging.getLogger("jqlens.intake")


@dataclass(frozen=True)
class UploadedDocument:
    filename: str
    path: Path
    original_name: str
    extension: str
    size_bytes: int


class UploadIntake:
    def __init__(self, store: TempFileStore, field_name: str = "jsonFile"):
        self.store = store
        self.field_name = field_name

    def select_file(self, form: FormData) -> UploadFile:
        """Pick the single upload under ``field_name`` or raise an intake error."""
        for key, value in form.multi_items():
            if key != self.field_name and isinstance(value, UploadFile):
                raise UnexpectedFile(f"Unexpected field: {key}")

        files = [value for value in form.getlist(self.field_name) if isinstance(value, UploadFile)]
        if len(files) > 1:
            raise UnexpectedFile(f"Only one file may be uploaded under '{self.field_name}'")
        if not files or not files[0].filename:
            raise MissingFile()
        return files[0]

    async def accept(self, form: FormData) -> UploadedDocument:
        upload = self.select_file(form)
        original_name = Path(upload.filename).name
        extension = Path(original_name).suffix
        if extension != UPLOAD_SUFFIX:
            logger.info("Rejected upload %r: extension %r", original_name, extension)
            raise InvalidFileType()

        raw = await upload.read()
        filename = self.store.generate_name(self.field_name)
        path = await self.store.write(filename, raw)
        logger.info("Stored upload %r as %s (%d bytes)", original_name, filename, len(raw))
        return UploadedDocument(
            filename=filename,
            path=path,
            original_name=original_name,
            extension=extension,
            size_bytes=len(raw),
        )
