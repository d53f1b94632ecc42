"""Zip serialization of an assembled bundle."""

import io
import logging
import zipfile

from ..models.errors import PackagingError
from .assembler import Bundle


logger = logging.getLogger(__name__)

# Fixed entry timestamp so identical bundles give identical archives.
ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)

PACKAGING_FAILED_MESSAGE = "ZIP generation failed. Please try the download again."


def write_archive(bundle: Bundle) -> bytes:
    """
    Serialize a bundle to zip bytes.

    Raises:
        PackagingError: If any entry cannot be written; no partial
            archive is returned
    """
    buffer = io.BytesIO()

    try:
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for name, data in bundle.files.items():
                info = zipfile.ZipInfo(name, date_time=ZIP_DATE_TIME)
                info.compress_type = zipfile.ZIP_DEFLATED
                info.external_attr = 0o644 << 16
                if isinstance(data, str):
                    data = data.encode("utf-8")
                archive.writestr(info, data)
    except Exception as e:
        logger.error(f"Failed to write archive {bundle.archive_name}: {str(e)}", exc_info=True)
        raise PackagingError(PACKAGING_FAILED_MESSAGE, archive_name=bundle.archive_name)

    payload = buffer.getvalue()
    logger.info(f"Archive {bundle.archive_name} written ({len(payload)} bytes, {len(bundle.files)} entries)")
    return payload
