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

"""Tests for list_databases tool."""

import pytest
from unittest.mock import patch
from upstash.redis_mcp_server.constants import LIST_DATABASE_FIELDS
from upstash.redis_mcp_server.tools.database.list_databases import list_databases


class TestListDatabases:
    """Test cases for list_databases function."""

    @pytest.mark.asyncio
    async def test_list_databases_selects_fields(self, mock_upstash_api, sample_database):
        """Test that listed databases only carry the allowlisted fields."""
        other = dict(sample_database, database_id='db-2', database_name='sessions')
        other['some_future_field'] = 'value'
        mock_upstash_api.add('GET', '/v2/redis/databases', json_body=[sample_database, other])

        result = await list_databases()

        assert len(result) == 2
        assert [db['database_name'] for db in result] == ['cache1', 'sessions']
        for db in result:
            assert set(db) <= set(LIST_DATABASE_FIELDS)
        assert set(result[0]) == set(LIST_DATABASE_FIELDS)
        assert 'some_future_field' not in result[1]
        assert 'db_memory_threshold' not in result[0]

        assert len(mock_upstash_api.requests) == 1
        assert mock_upstash_api.last_request.method == 'GET'

    @pytest.mark.asyncio
    async def test_list_databases_empty(self, mock_upstash_api):
        """Test listing an account without databases."""
        mock_upstash_api.add('GET', '/v2/redis/databases', json_body=[])

        assert await list_databases() == []

    @pytest.mark.asyncio
    async def test_list_databases_readonly_mode(
        self, mock_upstash_api, mock_upstash_context_readonly, sample_database
    ):
        """Test that listing is allowed in readonly mode."""
        mock_upstash_api.add('GET', '/v2/redis/databases', json_body=[sample_database])

        result = await list_databases()

        assert result[0]['database_id'] == sample_database['database_id']

    @pytest.mark.asyncio
    async def test_list_databases_logs_success(self, mock_upstash_api, sample_database):
        """Test that a completed listing is logged as a success."""
        mock_upstash_api.add('GET', '/v2/redis/databases', json_body=[sample_database])

        with patch('upstash.redis_mcp_server.tools.database.list_databases.logger') as mock_logger:
            await list_databases()

        mock_logger.success.assert_called_once_with('Successfully listed 1 Redis databases')
