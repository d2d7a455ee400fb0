# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Connection management for the Upstash management API."""

import httpx
import os
from ..constants import (
    DEFAULT_API_BASE_URL,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    DOT_SEGMENTS,
)
from .server import SERVER_VERSION
from loguru import logger
from typing import Any, Dict, Optional
from urllib.parse import quote


def build_api_path(*segments: str) -> str:
    """Join path segments, percent-encoding each one.

    Args:
        segments: The path segments, e.g. ('v2/redis/database', database_id)

    Returns:
        The relative API path

    Raises:
        ValueError: If an identifier is a dot segment
    """
    # the first segment is a fixed route and keeps its slashes
    route, *identifiers = segments
    for segment in identifiers:
        if str(segment) in DOT_SEGMENTS:
            raise ValueError(f'Invalid path segment: {segment!r}')
    return '/'.join([route.strip('/')] + [quote(str(segment), safe='') for segment in identifiers])


class UpstashConnectionManager:
    """Manages the HTTP client used to talk to the Upstash management API."""

    _client: Optional[httpx.AsyncClient] = None
    _env_prefix = 'UPSTASH'
    _email: Optional[str] = None
    _api_key: Optional[str] = None
    _base_url: Optional[str] = None

    @classmethod
    def initialize(
        cls,
        email: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
    ):
        """Initialize the connection manager with credentials and API location.

        Values left as None are read from the environment when the client is created.

        Args:
            email (str): Upstash account email
            api_key (str): Upstash management API key
            base_url (str): Base URL of the Upstash management API
        """
        cls._email = email
        cls._api_key = api_key
        cls._base_url = base_url

        cls._client = None

    @classmethod
    def get_base_url(cls) -> str:
        """Get the base URL of the Upstash management API.

        Returns:
            str: The configured base URL
        """
        return cls._base_url or os.environ.get(
            f'{cls._env_prefix}_API_BASE_URL', DEFAULT_API_BASE_URL
        )

    @classmethod
    def get_connection(cls) -> httpx.AsyncClient:
        """Get or create the HTTP client for the Upstash management API.

        Returns:
            httpx.AsyncClient: A client with base URL, basic auth and timeouts configured
        """
        if cls._client is None:
            email = cls._email or os.environ.get(f'{cls._env_prefix}_EMAIL', '')
            api_key = cls._api_key or os.environ.get(f'{cls._env_prefix}_API_KEY', '')
            if not email or not api_key:
                logger.warning(
                    f'{cls._env_prefix}_EMAIL or {cls._env_prefix}_API_KEY is not set, '
                    'requests to the Upstash API will be rejected'
                )

            connect_timeout = float(
                os.environ.get(f'{cls._env_prefix}_CONNECT_TIMEOUT', DEFAULT_CONNECT_TIMEOUT)
            )
            read_timeout = float(
                os.environ.get(f'{cls._env_prefix}_READ_TIMEOUT', DEFAULT_READ_TIMEOUT)
            )

            cls._client = httpx.AsyncClient(
                base_url=cls.get_base_url(),
                auth=httpx.BasicAuth(email, api_key),
                timeout=httpx.Timeout(read_timeout, connect=connect_timeout),
                headers={
                    # identify requests coming from LLM/MCP
                    'User-Agent': f'MCP/UpstashRedisMCPServer/{SERVER_VERSION}',
                    'Accept': 'application/json',
                },
            )

        return cls._client

    @classmethod
    async def close_connection(cls) -> None:
        """Close the HTTP client."""
        if cls._client is not None:
            await cls._client.aclose()
            cls._client = None

    @classmethod
    async def request(
        cls,
        method: str,
        *segments: str,
        body: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send one request to the Upstash management API.

        Args:
            method: HTTP method
            segments: Path segments, joined by build_api_path
            body: JSON body to send, if any
            params: Query string parameters, if any

        Returns:
            The decoded JSON body, the raw text for non-JSON bodies, or None when
            the response has no body

        Raises:
            ValueError: An identifier segment is '.' or '..'
            httpx.HTTPStatusError: The API answered with a non-success status
            httpx.HTTPError: The request could not be completed
        """
        client = cls.get_connection()
        response = await client.request(
            method, build_api_path(*segments), json=body, params=params
        )
        response.raise_for_status()

        if not response.content:
            return None
        if 'json' not in response.headers.get('content-type', ''):
            return response.text
        return response.json()
