from collections.abc import Mapping
import logging
from typing import Any, Optional

import requests

from .exception import (
    APIException,
    DecodingException,
    NotFoundException,
    TransportException,
)

logger = logging.getLogger(__name__)


class APIResponse(object):
    def __init__(self, data: Any, status_code: int, headers: Mapping = None):
        self.data = data
        self.status_code = status_code
        self.headers = headers if headers is not None else {}
        self.errors = list()
        if isinstance(data, Mapping):
            for key in ["message", "error"]:
                if key in data:
                    self.errors.append(data[key])

    @classmethod
    def from_response(
        cls, response: requests.Response, strict: bool = True
    ) -> "APIResponse":
        data = None
        if response.content:
            try:
                data = response.json()
            except ValueError as e:
                if strict:
                    raise DecodingException(
                        f"Invalid JSON in response from {response.url}"
                    ) from e
                data = response.text
        return cls(data, response.status_code, response.headers)

    def __str__(self):
        if self.errors:
            rval = list()
            for error in self.errors:
                if isinstance(error, Mapping):
                    # Validation errors: {"field": ["is invalid", ...]}
                    for key, value in error.items():
                        if isinstance(value, list):
                            value = ", ".join(str(item) for item in value)
                        rval.append(f"{key}: '{value}'")
                elif isinstance(error, list):
                    rval.extend(str(item) for item in error)
                else:
                    rval.append(str(error))
            return ", ".join(rval)
        elif isinstance(self.data, str):
            return self.data
        return f"HTTP {self.status_code}"


class APICaller(object):
    def __init__(
        self,
        host: str,
        base_url: str,
        headers: Mapping = None,
        timeout: Optional[float] = None,
    ):
        self._host = host.rstrip("/")
        self._base_url = base_url.strip("/")
        self._headers = headers
        self._timeout = timeout

    def _url(self, path: str) -> str:
        if path.startswith("/"):
            return "".join([self._host, path])
        return "/".join([self._host, self._base_url, path])

    def _call(
        self, method: str = "get", path: str = "/", **kwargs
    ) -> APIResponse:
        method = method.lower()
        requester = getattr(requests, method)
        url = self._url(path)

        headers = dict(self._headers or {})
        headers.update(kwargs.pop("headers", None) or {})
        kwargs.setdefault("timeout", self._timeout)

        logger.debug("%s %s", method.upper(), url)
        try:
            response = requester(url=url, headers=headers, **kwargs)
        except requests.exceptions.RequestException as e:
            raise TransportException(f"{method.upper()} {url} failed: {e}") from e
        logger.debug("%s %s returned %s", method.upper(), url, response.status_code)

        if response.status_code < 400:
            # The body of a delete is not used, a broken one must not fail it
            return APIResponse.from_response(response, strict=method not in ["delete"])
        else:
            api_response = APIResponse.from_response(response, strict=False)
            message = f"APIError code: {response.status_code}"
            if api_response.errors or isinstance(api_response.data, str):
                message = f"{message}: {api_response}"
            if response.status_code == 404:
                raise NotFoundException(message, response)
            raise APIException(message, response)

    def get(self, **kwargs) -> APIResponse:
        return self._call(method="get", **kwargs)

    def put(self, **kwargs) -> APIResponse:
        return self._call(method="put", **kwargs)

    def post(self, **kwargs) -> APIResponse:
        return self._call(method="post", **kwargs)

    def patch(self, **kwargs) -> APIResponse:
        return self._call(method="patch", **kwargs)

    def delete(self, **kwargs) -> APIResponse:
        return self._call(method="delete", **kwargs)
