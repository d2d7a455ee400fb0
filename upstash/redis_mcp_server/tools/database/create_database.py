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

"""Tool to create a new Upstash Redis database."""

from ...common.connection import UpstashConnectionManager
from ...common.decorator import handle_exceptions, readonly_check
from ...common.server import mcp
from ...common.utils import get_console_url
from ...constants import (
    GENERIC_DATABASE_NOTES,
    GLOBAL_DATABASE_REGION,
    PATH_DATABASE,
    READ_REGIONS_DESCRIPTION,
    SUCCESS_CREATED,
)
from ...models import Region
from loguru import logger
from pydantic import Field
from typing import Any, Dict, List, Optional
from typing_extensions import Annotated


CREATE_DATABASE_TOOL_DESCRIPTION = f"""Create a new Upstash redis database.

<use_case>
Use this tool to provision a new global Upstash Redis database with a primary
region and, optionally, a set of read regions.
</use_case>

<important_notes>
1. Ask the user for the region and name of the database.
2. Creating a database is not idempotent: every call provisions a new database.
3. When the server runs with --readonly, this operation is rejected.
</important_notes>

## Response structure
Returns the new database record (`database_id`, `database_name`, `endpoint`,
`password`, `rest_token`, ...) plus:
- `console_url`: Link to the database in the Upstash console
- `message`: Success message confirming the creation
{GENERIC_DATABASE_NOTES}"""


@mcp.tool(
    name='redis_database_create_new',
    description=CREATE_DATABASE_TOOL_DESCRIPTION,
)
@handle_exceptions
@readonly_check
async def create_database(
    name: Annotated[str, Field(description='Name of the database.', min_length=1)],
    primary_region: Annotated[
        Region,
        Field(description=f'Primary Region of the Global Database. {READ_REGIONS_DESCRIPTION}'),
    ],
    read_regions: Annotated[
        Optional[List[Region]],
        Field(description=f'Array of Read Regions of the Database. {READ_REGIONS_DESCRIPTION}'),
    ] = None,
) -> Dict[str, Any]:
    """Create a new Upstash Redis database.

    Args:
        name: Name of the database
        primary_region: Primary region of the global database
        read_regions: Read regions of the database

    Returns:
        Dict[str, Any]: The new database record with its console URL
    """
    body = {
        'name': name,
        'region': GLOBAL_DATABASE_REGION,
        'primary_region': primary_region,
    }
    if read_regions is not None:
        body['read_regions'] = read_regions

    logger.info(f'Creating Redis database {name} in {primary_region}')
    database = await UpstashConnectionManager.request('POST', PATH_DATABASE, body=body)
    logger.success(f'Successfully created Redis database {name}')

    result = dict(database)
    result['console_url'] = get_console_url(database['database_id'])
    result['message'] = SUCCESS_CREATED.format(f'Redis database {name}')

    return result
