import os

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = {
    "txt": "text/plain",
    "html": "text/html",
    "htm": "text/html",
    "css": "text/css",
    "js": "application/javascript",
    "json": "application/json",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    "pdf": "application/pdf",
    "mp3": "audio/mpeg",
    "mp4": "video/mp4",
}

# Browsers render these themselves instead of offering a download
INLINE_CATEGORIES = {"text", "image", "audio", "video"}
INLINE_TYPES = {"application/pdf", "application/json", "application/xml"}


def mime_type_for(path: str) -> str:
    _, ext = os.path.splitext(os.path.basename(path))
    return MIME_TYPES.get(ext[1:].lower(), DEFAULT_MIME_TYPE)


def is_inline(mime_type: str) -> bool:
    category = mime_type.split("/", 1)[0]
    return category in INLINE_CATEGORIES or mime_type in INLINE_TYPES


def content_disposition(path: str, mime_type: str) -> str:
    """Content-Disposition value for serving path as mime_type.

    The file name is quoted as-is; quotes inside it are not escaped.
    """
    if is_inline(mime_type):
        return "inline"
    return f'attachment; filename="{os.path.basename(path)}"'
