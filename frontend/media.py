"""
Image encoding
Images never leave the client as files, they are embedded as data URLs
"""
import base64
import mimetypes
from pathlib import Path
from typing import Optional, Union

DEFAULT_MIME_TYPE = "application/octet-stream"


def to_data_url(data: bytes, mime_type: Optional[str] = None) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type or DEFAULT_MIME_TYPE};base64,{encoded}"


def file_to_data_url(source: Union[str, Path, bytes], mime_type: Optional[str] = None) -> str:
    """
    Read an image fully into memory and encode it as a data URL

    No size limit is applied here; the server's body ceiling is the only bound.

    Args:
        source: Path to the image, or its raw bytes
        mime_type: Overrides the type guessed from the file extension

    Returns:
        "data:<mime>;base64,<payload>"

    Raises:
        OSError: If the file cannot be read
    """
    if isinstance(source, bytes):
        return to_data_url(source, mime_type)

    path = Path(source)
    guessed, _ = mimetypes.guess_type(path.name)
    return to_data_url(path.read_bytes(), mime_type or guessed)
