"""HTTP template backed by httpx."""

import logging
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, TypeVar

import httpx

from ..config import HttpTemplateSettings
from ..exceptions import ClientCloseError, HttpUtilsError, TransportError, UrlEncodeError
from ..handlers import build_query_string, handle_download_response, handle_text_response
from ..template import HttpTemplate

T = TypeVar("T")


class HttpClientTemplate(HttpTemplate):
    """Stateless HTTP template that opens one httpx client per call.

    The client is closed on every exit path. Nothing is shared between
    calls, so one instance may be used from several threads.
    """

    def __init__(
        self,
        settings: Optional[HttpTemplateSettings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the HTTP template.

        Args:
            settings: HTTP template configuration. If None, will load from environment.
            transport: Optional httpx transport handed to every client (e.g. httpx.MockTransport)
        """
        self.settings = settings or HttpTemplateSettings()
        self.transport = transport
        self.logger = logging.getLogger(__name__)

    def _create_client(self) -> httpx.Client:
        # No timeout unless one is configured
        timeout_config = httpx.Timeout(
            None,
            connect=self.settings.connection_timeout,
            read=self.settings.read_timeout,
        )
        return httpx.Client(
            timeout=timeout_config,
            follow_redirects=self.settings.follow_redirects,
            transport=self.transport,
        )

    def _post_entity(self, request_body: str, content_type: Optional[str]) -> Dict[str, object]:
        """Build the content and headers of a POST request.

        Raises:
            UrlEncodeError: If the body cannot be encoded or the content type is not ASCII
        """
        try:
            content = request_body.encode(self.settings.encoding)
        except (UnicodeError, LookupError) as e:
            raise UrlEncodeError("Request body encode error.", e) from e

        # Header values must be ASCII
        header_value = content_type if content_type else self.settings.default_content_type
        try:
            header_value.encode("ascii")
        except UnicodeError as e:
            raise UrlEncodeError("Content type encode error.", e) from e

        return {
            "content": content,
            "headers": {"Content-Type": header_value},
        }

    def _execute(
        self,
        method: str,
        url: str,
        handler: Callable[[httpx.Response], T],
        action: str,
        **request_kwargs,
    ) -> T:
        """Send one request on a fresh client and pass the response to ``handler``.

        Raises:
            HttpUtilsError: Errors raised by the handler are re-raised as-is
            TransportError: If the request cannot be sent or the response read
            ClientCloseError: If the client cannot be closed
        """
        client = self._create_client()
        try:
            self.logger.debug(f"Making {method} request to {url}")
            with client.stream(method, url, **request_kwargs) as response:
                result = handler(response)
            self.logger.debug(f"{method} {url} successful")
            return result
        except HttpUtilsError as e:
            self.logger.error(f"{method} {url} failed: {e}")
            raise
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
            self.logger.error(f"Transport error for {method} {url}: {str(e)}")
            raise TransportError(f"{action} {url} error.", e) from e
        finally:
            try:
                client.close()
            except (httpx.HTTPError, OSError) as e:
                self.logger.error(f"Failed to close http client for {url}: {str(e)}")
                raise ClientCloseError("Close http stream error.", e) from e

    def _read_text(self, response: httpx.Response) -> Optional[str]:
        return handle_text_response(response.status_code, response.iter_bytes(), self.settings.encoding)

    def _save_file(self, response: httpx.Response) -> Path:
        return handle_download_response(
            response.status_code,
            response.iter_bytes(chunk_size=self.settings.chunk_size),
            directory=self.settings.download_dir,
            suffix=self.settings.download_suffix,
        )

    def get(self, url: str, params: Optional[Mapping[str, str]] = None) -> Optional[str]:
        """Make a GET request.

        Args:
            url: The URL to request
            params: Optional query arguments, values are percent-encoded

        Returns:
            Response body as text, or None if the response has no body

        Raises:
            UrlEncodeError: If a query value cannot be encoded
            UnexpectedStatusError: If the status is not 2xx
            TransportError: If the request fails
        """
        url_with_args = build_query_string(url, params, self.settings.encoding)
        return self._execute("GET", url_with_args, self._read_text, "Get from")

    def post(
        self,
        url: str,
        params: Optional[Mapping[str, str]],
        request_body: str,
        content_type: Optional[str] = None,
    ) -> Optional[str]:
        """Make a POST request with a text body.

        Args:
            url: The URL to request
            params: Optional query arguments
            request_body: Body text, sent encoded as UTF-8
            content_type: Content type of the body; the configured default is used when empty

        Returns:
            Response body as text, or None if the response has no body
        """
        url_with_args = build_query_string(url, params, self.settings.encoding)
        return self._execute(
            "POST",
            url_with_args,
            self._read_text,
            "Post to",
            **self._post_entity(request_body, content_type),
        )

    def download(self, url: str, params: Optional[Mapping[str, str]] = None) -> Path:
        """Download the response of a GET request into a new ``.dld`` file.

        The returned file is not removed by this library.

        Raises:
            NoContentError: If the response has no body
            DownloadFileError: If the file cannot be written
        """
        url_with_args = build_query_string(url, params, self.settings.encoding)
        return self._execute("GET", url_with_args, self._save_file, "Download from")

    def download_use_post(
        self,
        url: str,
        params: Optional[Mapping[str, str]],
        request_body: str,
        content_type: Optional[str] = None,
    ) -> Path:
        """Download the response of a POST request into a new ``.dld`` file."""
        url_with_args = build_query_string(url, params, self.settings.encoding)
        return self._execute(
            "POST",
            url_with_args,
            self._save_file,
            "Download from",
            **self._post_entity(request_body, content_type),
        )
