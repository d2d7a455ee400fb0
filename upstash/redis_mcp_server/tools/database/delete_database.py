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

"""Tool to delete an Upstash Redis database."""

from ...common.connection import UpstashConnectionManager
from ...common.decorator import handle_exceptions, readonly_check
from ...common.server import mcp
from ...constants import DATABASE_ID_PATTERN, PATH_DATABASE, SUCCESS_DELETED
from loguru import logger
from pydantic import Field
from typing_extensions import Annotated


DELETE_DATABASE_TOOL_DESCRIPTION = """Delete an Upstash redis database.

<important_notes>
1. This is a destructive operation that permanently deletes the database and its data
2. When the server runs with --readonly, this operation is rejected
</important_notes>
"""


@mcp.tool(
    name='redis_database_delete',
    description=DELETE_DATABASE_TOOL_DESCRIPTION,
)
@handle_exceptions
@readonly_check
async def delete_database(
    database_id: Annotated[
        str,
        Field(
            description='The ID of the database to delete.',
            min_length=1,
            pattern=DATABASE_ID_PATTERN,
        ),
    ],
) -> str:
    """Delete an Upstash Redis database.

    Args:
        database_id: The ID of the database to delete

    Returns:
        str: Confirmation message
    """
    logger.info(f'Deleting Redis database {database_id}')
    await UpstashConnectionManager.request('DELETE', PATH_DATABASE, database_id)
    logger.success(f'Successfully deleted Redis database {database_id}')

    return SUCCESS_DELETED
