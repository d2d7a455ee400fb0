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

"""Tool to reset the password of an Upstash Redis database."""

from ...common.connection import UpstashConnectionManager
from ...common.decorator import handle_exceptions, readonly_check
from ...common.server import mcp
from ...constants import DATABASE_ID_PATTERN, PATH_RESET_PASSWORD
from loguru import logger
from pydantic import Field
from typing import Any, Dict
from typing_extensions import Annotated


RESET_PASSWORD_TOOL_DESCRIPTION = """Reset the password of an Upstash redis database.

The previous password and REST tokens stop working once the reset completes.
"""


@mcp.tool(
    name='redis_database_reset_password',
    description=RESET_PASSWORD_TOOL_DESCRIPTION,
)
@handle_exceptions
@readonly_check
async def reset_database_password(
    id: Annotated[
        str,
        Field(description='The ID of your database.', min_length=1, pattern=DATABASE_ID_PATTERN),
    ],
) -> Dict[str, Any]:
    """Reset the password of an Upstash Redis database.

    Args:
        id: The ID of the database

    Returns:
        Dict[str, Any]: The database record with the new credentials
    """
    logger.info(f'Resetting password of Redis database {id}')
    database = await UpstashConnectionManager.request('POST', PATH_RESET_PASSWORD, id, body={})
    logger.success(f'Successfully reset password of Redis database {id}')

    return database
