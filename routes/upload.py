"""
Document upload route.

Handles file upload, type check and page counting. Returns the file's
default print options, which the order form then edits and posts back.
"""

from datetime import datetime, timezone
from pathlib import Path

from flask import Blueprint, current_app, request
from werkzeug.utils import secure_filename

from core.exceptions import UnsupportedFileTypeError
from logging_config import get_logger
from modules.page_estimator import is_supported


# Module logger
logger = get_logger(__name__)

upload_bp = Blueprint("upload", __name__)

# Constants
MAX_FILENAME_LENGTH = 255


@upload_bp.route("/api/uploads", methods=["POST"])
def upload():
    """
    Accept one document (multipart field ``file``).

    Returns:
        201 with {"storedFilename", "file": FileSpec dict}
    """
    upload_file = request.files.get("file")

    # Validation: File required
    if not upload_file or upload_file.filename == "":
        return {"error": "Please choose a file to upload.", "details": {}}, 400

    # Validation: Filename length
    if len(upload_file.filename) > MAX_FILENAME_LENGTH:
        return {
            "error": f"Filename too long. Maximum {MAX_FILENAME_LENGTH} characters.",
            "details": {},
        }, 400

    mime_type = upload_file.mimetype or ""
    if not is_supported(mime_type):
        raise UnsupportedFileTypeError(upload_file.filename, mime_type)

    upload_folder = Path(current_app.config["UPLOAD_FOLDER"])
    upload_folder.mkdir(parents=True, exist_ok=True)

    # Save file with timestamp prefix
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    safe_name = secure_filename(upload_file.filename) or "document"
    stored_name = f"{timestamp}_{safe_name}"
    stored_path = upload_folder / stored_name

    logger.info(f"Saving uploaded file: {stored_name}")
    upload_file.save(stored_path)
    size_bytes = stored_path.stat().st_size

    estimator = current_app.config["PAGE_ESTIMATOR"]
    page_count = estimator.count_pages(stored_path, mime_type, size_bytes)
    logger.info(f"Page count for {stored_name}: {page_count}")

    spec = estimator.build_file_spec(
        name=upload_file.filename,
        mime_type=mime_type,
        size_bytes=size_bytes,
        page_count=page_count,
    )
    return {"storedFilename": stored_name, "file": spec.to_dict()}, 201
