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

"""Tool to list Upstash Redis databases."""

from ...common.connection import UpstashConnectionManager
from ...common.decorator import handle_exceptions
from ...common.server import mcp
from ...common.utils import select_database_fields
from ...constants import GENERIC_DATABASE_NOTES, PATH_DATABASES
from loguru import logger
from typing import Any, Dict, List


LIST_DATABASES_TOOL_DESCRIPTION = (
    'List all Upstash redis databases. '
    'Includes names, regions, password, creation time and more.'
    f'{GENERIC_DATABASE_NOTES}'
)


@mcp.tool(
    name='redis_database_list_databases',
    description=LIST_DATABASES_TOOL_DESCRIPTION,
)
@handle_exceptions
async def list_databases() -> List[Dict[str, Any]]:
    """List all Upstash Redis databases of the account.

    Returns:
        List[Dict[str, Any]]: The databases, each reduced to the listed fields
    """
    logger.info('Listing Redis databases')
    databases = await UpstashConnectionManager.request('GET', PATH_DATABASES) or []
    logger.success(f'Successfully listed {len(databases)} Redis databases')

    return [select_database_fields(database) for database in databases]
