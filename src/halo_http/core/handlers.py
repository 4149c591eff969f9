"""Request building and response handling helpers.

These functions never touch the network: they take a status code and a
body stream, so they can be exercised with plain iterables of bytes.
"""

import logging
import uuid
from pathlib import Path
from typing import Iterable, Mapping, Optional, Union
from urllib.parse import quote

from .config import DOWNLOAD_SUFFIX
from .exceptions import DownloadFileError, NoContentError, UnexpectedStatusError, UrlEncodeError

logger = logging.getLogger(__name__)

# Status codes whose responses never carry an entity
NO_ENTITY_STATUS_CODES = frozenset({204, 205, 304})


def build_query_string(base_url: str, params: Optional[Mapping[str, str]], encoding: str = "UTF-8") -> str:
    """Append percent-encoded query arguments to a base URL.

    Args:
        base_url: URL without query arguments
        params: Mapping of parameter name to value; names are used as-is
        encoding: Charset used to encode the values

    Returns:
        ``base_url`` unchanged when there are no params, otherwise
        ``base_url?name1=value1&name2=value2``

    Raises:
        UrlEncodeError: If a value cannot be encoded
    """
    if not params:
        return base_url

    pairs = []
    for name, value in params.items():
        try:
            encoded = quote(value, safe="", encoding=encoding, errors="strict")
        except (UnicodeError, TypeError, LookupError) as e:
            raise UrlEncodeError("URL encode error.", e) from e
        pairs.append(f"{name}={encoded}")

    return base_url + "?" + "&".join(pairs)


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def has_entity(status_code: int) -> bool:
    """Whether a response with this status carries a body."""
    return status_code not in NO_ENTITY_STATUS_CODES


def check_status(status_code: int) -> None:
    """Raise UnexpectedStatusError for any non-2xx status."""
    if not is_success(status_code):
        raise UnexpectedStatusError(status_code)


def handle_text_response(status_code: int, body: Iterable[bytes], encoding: str = "UTF-8") -> Optional[str]:
    """Extract a text body from a 2xx response.

    Args:
        status_code: Response status code
        body: Response body chunks
        encoding: Charset used to decode the body

    Returns:
        The decoded body, or None when the response has no entity

    Raises:
        UnexpectedStatusError: For non-2xx responses
    """
    check_status(status_code)
    if not has_entity(status_code):
        return None
    return b"".join(body).decode(encoding, errors="replace")


def handle_download_response(
    status_code: int,
    body: Iterable[bytes],
    directory: Optional[Union[str, Path]] = None,
    suffix: str = DOWNLOAD_SUFFIX,
) -> Path:
    """Stream a 2xx response body into a new download file.

    Raises:
        UnexpectedStatusError: For non-2xx responses
        NoContentError: When the response has no entity
        DownloadFileError: When the local file cannot be written
    """
    check_status(status_code)
    if not has_entity(status_code):
        raise NoContentError()
    return save_stream_to_file(body, directory, suffix)


def new_download_path(directory: Optional[Union[str, Path]] = None, suffix: str = DOWNLOAD_SUFFIX) -> Path:
    """Return a fresh ``<uuid4><suffix>`` path in ``directory`` (default: cwd)."""
    base = Path(directory) if directory else Path.cwd()
    return base / f"{uuid.uuid4()}{suffix}"


def save_stream_to_file(
    chunks: Iterable[bytes],
    directory: Optional[Union[str, Path]] = None,
    suffix: str = DOWNLOAD_SUFFIX,
) -> Path:
    """Copy body chunks into a newly created file.

    The file is never removed here, even when copying fails part way:
    the caller owns it.

    Returns:
        Path of the written file

    Raises:
        DownloadFileError: If the file cannot be created, written or closed
    """
    download_file = new_download_path(directory, suffix)
    try:
        output = open(download_file, "xb")
    except OSError as e:
        raise DownloadFileError("Can't create new download file.", e) from e

    logger.debug(f"Saving response body to {download_file}")
    try:
        for chunk in chunks:
            output.write(chunk)
    except OSError as e:
        raise DownloadFileError("Can't read from input stream or write to output stream.", e) from e
    finally:
        try:
            output.flush()
            output.close()
        except OSError as e:
            raise DownloadFileError("Close stream error.", e) from e

    return download_file
