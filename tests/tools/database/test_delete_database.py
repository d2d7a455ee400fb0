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

"""Tests for delete_database tool."""

import httpx
import pytest
from upstash.redis_mcp_server.exceptions import ReadOnlyModeException
from upstash.redis_mcp_server.tools.database.delete_database import delete_database


class TestDeleteDatabase:
    """Test cases for delete_database function."""

    @pytest.mark.asyncio
    async def test_delete_database_success(self, mock_upstash_api):
        """Test successful database deletion."""
        mock_upstash_api.add('DELETE', '/v2/redis/database/db-123', json_body='OK')

        result = await delete_database(database_id='db-123')

        assert result == 'Database deleted successfully.'
        assert len(mock_upstash_api.requests) == 1
        assert mock_upstash_api.last_request.method == 'DELETE'
        assert mock_upstash_api.last_request.content == b''

    @pytest.mark.asyncio
    async def test_delete_database_not_found(self, mock_upstash_api):
        """Test deletion of an unknown database."""
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await delete_database(database_id='missing')

        assert exc_info.value.response.status_code == 404
        assert len(mock_upstash_api.requests) == 1

    @pytest.mark.asyncio
    async def test_delete_database_readonly_mode(
        self, mock_upstash_api, mock_upstash_context_readonly
    ):
        """Test database deletion in readonly mode."""
        with pytest.raises(ReadOnlyModeException) as exc_info:
            await delete_database(database_id='db-123')

        assert exc_info.value.operation == 'delete_database'
        assert mock_upstash_api.requests == []

    @pytest.mark.asyncio
    async def test_delete_database_dot_segment_id(self, mock_upstash_api):
        """Test that a dot segment id does not delete through another route."""
        mock_upstash_api.add('DELETE', '/v2/redis', json_body='OK')

        with pytest.raises(ValueError):
            await delete_database(database_id='..')

        assert mock_upstash_api.requests == []
