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

"""Global pytest fixtures for Upstash Redis MCP Server tests."""

import httpx
import json
import os
import pytest
import upstash.redis_mcp_server.tools  # noqa: F401 - imported for side effects to register tools
from upstash.redis_mcp_server.common.connection import UpstashConnectionManager
from upstash.redis_mcp_server.common.context import UpstashContext
from unittest.mock import patch


TEST_BASE_URL = 'https://api.upstash.com'


class MockUpstashAPI:
    """Records requests and answers them with canned responses."""

    def __init__(self):
        """Start with no routes and no recorded requests."""
        self.requests = []
        self._routes = {}

    def add(self, method, path, json_body=None, status_code=200, text=None):
        """Register the response for a method and path."""
        if text is not None:
            content = {'text': text}
        elif json_body is not None:
            content = {'json': json_body}
        else:
            content = {}
        self._routes[(method, path)] = (status_code, content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        """Transport handler used by httpx.MockTransport."""
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={'error': 'not found'})
        status_code, content = route
        return httpx.Response(status_code, **content)

    @property
    def last_request(self) -> httpx.Request:
        """The most recent request."""
        return self.requests[-1]

    def last_body(self):
        """The decoded JSON body of the most recent request."""
        return json.loads(self.last_request.content)


@pytest.fixture(scope='session', autouse=True)
def tests_setup_and_teardown():
    """Mock environment variables for testing."""
    # Will be executed before the first test
    old_environ = dict(os.environ)
    os.environ.update(
        {
            'UPSTASH_EMAIL': 'test@example.com',
            'UPSTASH_API_KEY': 'mock_api_key',  # pragma: allowlist secret
        }
    )

    yield
    # Will be executed after the last test
    os.environ.clear()
    os.environ.update(old_environ)


@pytest.fixture(autouse=True)
def reset_upstash_state():
    """Reset the connection manager and context around every test."""
    UpstashConnectionManager.initialize()
    UpstashContext.initialize()

    yield

    UpstashConnectionManager.initialize()
    UpstashContext.initialize()


@pytest.fixture
def mock_upstash_api():
    """Fixture providing a mock Upstash API behind the connection manager.

    Every request sent through UpstashConnectionManager is recorded in
    `requests` and answered from the registered routes.
    """
    api = MockUpstashAPI()
    UpstashConnectionManager._client = httpx.AsyncClient(
        base_url=TEST_BASE_URL,
        auth=httpx.BasicAuth('test@example.com', 'mock_api_key'),
        transport=httpx.MockTransport(api.handler),
    )

    yield api

    UpstashConnectionManager._client = None


@pytest.fixture
def mock_upstash_context_readonly():
    """Mock Upstash context to deny write operations (readonly_mode returns True)."""
    with patch.object(UpstashContext, 'readonly_mode', return_value=True) as mock:
        yield mock


@pytest.fixture
def sample_database():
    """Return a sample database record as the Upstash API returns it."""
    return {
        'database_id': '96ad0856-03b1-4ee7-9666-e81abd0349e1',
        'database_name': 'cache1',
        'database_type': 'Pay as You Go',
        'region': 'global',
        'type': 'paid',
        'port': 6379,
        'creation_time': 1717158000,
        'budget': 20,
        'state': 'active',
        'password': 'AbC123dEf',  # pragma: allowlist secret
        'user_email': 'test@example.com',
        'endpoint': 'good-lemur-12345.upstash.io',
        'tls': True,
        'rest_token': 'AX_sASQgODM5ZjExZGEtMmI3Mi00Mjcw',  # pragma: allowlist secret
        'read_only_rest_token': 'An_sASQgODM5ZjExZGEtMmI3Mi00Mjcw',  # pragma: allowlist secret
        'primary_region': 'us-east-1',
        'read_regions': ['us-west-1'],
        'db_acl_enabled': 'false',
        'db_acl_default_user_status': 'true',
        'db_disk_threshold': 107374182400,
        'db_memory_threshold': 3221225472,
        'db_daily_bandwidth_limit': 53687091200,
        'db_request_limit': 9223372036854775807,
        'db_max_clients': 10000,
        'eviction': False,
        'consistent': False,
        'multizone': False,
    }


@pytest.fixture
def sample_usage_stats():
    """Return a sample stats payload as the Upstash API returns it."""
    return {
        'read_latency_mean': [
            {'x': 1717160400000, 'y': 0.12},
            {'x': 1717160460000, 'y': 0.15},
            {'x': 1717160520000, 'y': None},
        ],
        'write_latency_mean': [
            {'x': 1717160400000, 'y': 0.2},
            {'x': 1717160460000, 'y': 0.3},
        ],
        'keyspace': [
            {'x': '2024-05-31 13:00:00 +0000 UTC', 'y': 42},
            {'x': '2024-05-31 13:01:00 +0000 UTC', 'y': 43},
        ],
        'throughput': [
            {'x': 1717160400000, 'y': 5},
            {'x': 1717160460000, 'y': 7},
        ],
        'diskusage': [
            {'x': 1717160400000, 'y': 1024},
            {'x': 1717160460000, 'y': 2048},
        ],
        'daily_net_commands': 1234,
        'command_counts': [
            {
                'metric_identifier': 'GET',
                'data_points': [
                    {'x': 1717160400000, 'y': 10},
                    {'x': 1717160460000, 'y': 12},
                    {'x': 1717160520000, 'y': None},
                ],
            },
            {
                'metric_identifier': 'SET',
                'data_points': [
                    {'x': 1717160400000, 'y': 3},
                    {'x': 1717160460000, 'y': 4},
                ],
            },
        ],
        'bandwidths': [{'x': 1717160400000, 'y': 512}],
        'days': ['Friday'],
    }
