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

"""Tool to get usage statistics of an Upstash Redis database."""

from ...common.connection import UpstashConnectionManager
from ...common.decorator import handle_exceptions
from ...common.server import mcp
from ...common.utils import parse_command_counts, parse_usage_data
from ...constants import DATABASE_ID_PATTERN, PATH_STATS, STATS_TYPE_COMMAND_COUNTS
from ...models import StatsPeriod, StatsType
from loguru import logger
from pydantic import Field
from typing import Any, Dict, List, Union
from typing_extensions import Annotated


GET_USAGE_STATS_TOOL_DESCRIPTION = """Get usage statistics of an Upstash redis database over a period of time.
Available stats: read_latency_mean, write_latency_mean, keyspace, throughput (cmds per second), daily_net_commands, diskusage, command_counts (stats of every command seperately).

## Response structure
For a single stat, returns:
- `start`: Timestamp of the first data point
- `end`: Timestamp of the last data point with a known value
- `data`: List of [epoch milliseconds, value] pairs; the most recent value may be null

For command_counts, returns one entry per command with `command`, `start`, `end` and `data`.
"""


@mcp.tool(
    name='redis_database_get_usage_stats',
    description=GET_USAGE_STATS_TOOL_DESCRIPTION,
)
@handle_exceptions
async def get_database_usage_stats(
    id: Annotated[
        str,
        Field(description='The ID of your database.', min_length=1, pattern=DATABASE_ID_PATTERN),
    ],
    period: Annotated[StatsPeriod, Field(description='The period of the stats.')],
    type: Annotated[StatsType, Field(description='The type of stat to get')],
) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
    """Get one usage statistic of an Upstash Redis database.

    Args:
        id: The ID of the database
        period: The period covered by the stats
        type: The stat to return

    Returns:
        The normalized series, the normalized per-command series for
        command_counts, or the whole stats payload when the requested stat
        is not a series
    """
    logger.info(f'Getting {type} stats of Redis database {id} for the last {period}')
    stats = await UpstashConnectionManager.request(
        'GET', PATH_STATS, id, params={'period': period}
    )
    logger.success(f'Successfully retrieved stats of Redis database {id}')

    stat = stats.get(type) if isinstance(stats, dict) else None
    if not isinstance(stat, list):
        logger.warning(f'Stat {type} is not a series, returning the raw stats payload')
        return stats

    if type == STATS_TYPE_COMMAND_COUNTS:
        return parse_command_counts(stat)
    return parse_usage_data(stat, metric=type)
