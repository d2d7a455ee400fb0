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

"""Tool to update the read regions of an Upstash Redis database."""

from ...common.connection import UpstashConnectionManager
from ...common.decorator import handle_exceptions, readonly_check
from ...common.server import mcp
from ...constants import DATABASE_ID_PATTERN, PATH_UPDATE_REGIONS, READ_REGIONS_DESCRIPTION
from ...models import Region
from loguru import logger
from pydantic import Field
from typing import Any, Dict, List
from typing_extensions import Annotated


UPDATE_REGIONS_TOOL_DESCRIPTION = """Update the read regions of an Upstash redis database.

<important_notes>
1. The given regions replace the current read regions; they are not merged with them
2. The primary region cannot be changed
3. When the server runs with --readonly, this operation is rejected
</important_notes>
"""


@mcp.tool(
    name='redis_database_update_regions',
    description=UPDATE_REGIONS_TOOL_DESCRIPTION,
)
@handle_exceptions
@readonly_check
async def update_database_regions(
    id: Annotated[
        str,
        Field(description='The ID of your database.', min_length=1, pattern=DATABASE_ID_PATTERN),
    ],
    read_regions: Annotated[
        List[Region],
        Field(
            description='Array of the new read regions of the database. '
            f'This will replace the old regions array. {READ_REGIONS_DESCRIPTION}',
            min_length=1,
        ),
    ],
) -> Dict[str, Any]:
    """Replace the read regions of an Upstash Redis database.

    Args:
        id: The ID of the database
        read_regions: The new read regions

    Returns:
        Dict[str, Any]: The updated database record
    """
    logger.info(f'Updating read regions of Redis database {id} to {read_regions}')
    database = await UpstashConnectionManager.request(
        'POST', PATH_UPDATE_REGIONS, id, body={'read_regions': read_regions}
    )
    logger.success(f'Successfully updated read regions of Redis database {id}')

    return database
