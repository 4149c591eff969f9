"""Base HTTP template interface."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Optional, TypeVar

from .json_adapters import JsonAdapter

P = TypeVar("P")
R = TypeVar("R")

JSON_CONTENT_TYPE = "application/json"


class HttpTemplate(ABC):
    """Abstract contract for one-shot HTTP helpers.

    Every operation issues exactly one request and raises HttpUtilsError on
    failure. Downloaded files belong to the caller, who must delete them.
    """

    @abstractmethod
    def get(self, url: str, params: Optional[Mapping[str, str]] = None) -> Optional[str]:
        """Issue a GET and return the response body as text (None if bodiless)."""
        pass

    @abstractmethod
    def post(
        self,
        url: str,
        params: Optional[Mapping[str, str]],
        request_body: str,
        content_type: Optional[str] = None,
    ) -> Optional[str]:
        """Issue a POST with a text body and return the response body as text."""
        pass

    @abstractmethod
    def download(self, url: str, params: Optional[Mapping[str, str]] = None) -> Path:
        """Issue a GET and stream the response body into a new file."""
        pass

    @abstractmethod
    def download_use_post(
        self,
        url: str,
        params: Optional[Mapping[str, str]],
        request_body: str,
        content_type: Optional[str] = None,
    ) -> Path:
        """Issue a POST and stream the response body into a new file."""
        pass

    def json_post(
        self,
        url: str,
        params: Optional[Mapping[str, str]],
        serializer: JsonAdapter[P],
        payload: P,
        deserializer: JsonAdapter[R],
    ) -> Optional[R]:
        """POST ``payload`` as JSON and decode the JSON response.

        Args:
            url: Target URL
            params: Query arguments
            serializer: Adapter turning ``payload`` into JSON text
            payload: Value to send
            deserializer: Adapter turning the response text into the result

        Returns:
            The decoded response, or None when the response has no body
        """
        json_str = serializer.dumps(payload)
        result_str = self.post(url, params, json_str, JSON_CONTENT_TYPE)
        if result_str is None:
            return None
        return deserializer.loads(result_str)
