import os

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES: dict[str, str] = {
    ".txt": "text/plain",
    ".csv": "text/csv",
    ".md": "text/markdown",
    ".log": "text/plain",
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "text/javascript",
    ".json": "application/json",
    ".xml": "application/xml",
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".xls": "application/vnd.ms-excel",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
}


def file_extension(file_name: str) -> str:
    """Return the lowercased last suffix of a file name, dot included.

    A name made only of a suffix (``".txt"``) is its own extension. A trailing
    dot yields no extension.
    """
    name = os.path.basename(file_name)
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return ""
    return name[dot:].lower()


def content_type_for(file_name: str) -> str:
    """Map a file name to a MIME type by extension. No content sniffing."""
    return CONTENT_TYPES.get(file_extension(file_name), DEFAULT_CONTENT_TYPE)
