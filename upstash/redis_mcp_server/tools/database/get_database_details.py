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

"""Tool to get the details of an Upstash Redis database."""

from ...common.connection import UpstashConnectionManager
from ...common.decorator import handle_exceptions
from ...common.server import mcp
from ...constants import DATABASE_ID_PATTERN, GENERIC_DATABASE_NOTES, PATH_DATABASE
from loguru import logger
from pydantic import Field
from typing import Any, Dict
from typing_extensions import Annotated


GET_DATABASE_DETAILS_TOOL_DESCRIPTION = f"""Get further details of a specific Upstash redis database. Includes all details of the database including usage statistics.
db_disk_threshold: Total disk usage limit.
db_memory_threshold: Maximum memory usage.
db_daily_bandwidth_limit: Maximum daily network bandwidth usage.
db_request_limit: Total number of commands allowed.
All sizes are in bytes
{GENERIC_DATABASE_NOTES}"""


@mcp.tool(
    name='redis_database_get_details',
    description=GET_DATABASE_DETAILS_TOOL_DESCRIPTION,
)
@handle_exceptions
async def get_database_details(
    database_id: Annotated[
        str,
        Field(
            description='The ID of the database to get details for.',
            min_length=1,
            pattern=DATABASE_ID_PATTERN,
        ),
    ],
) -> Dict[str, Any]:
    """Get the full record of an Upstash Redis database."""
    logger.info(f'Getting details of Redis database {database_id}')
    database = await UpstashConnectionManager.request('GET', PATH_DATABASE, database_id)
    logger.success(f'Successfully retrieved details of Redis database {database_id}')

    return database
