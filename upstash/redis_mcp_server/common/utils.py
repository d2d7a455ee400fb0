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

"""General utility functions for the Upstash Redis MCP Server."""

import datetime
from ..constants import (
    CONSOLE_URL_TEMPLATE,
    LIST_DATABASE_FIELDS,
    USAGE_TIMESTAMP_FORMATS,
    USAGE_TIMESTAMP_ZONE_SUFFIX,
)
from ..exceptions import EmptyUsageDataError
from typing import Any, Dict, List, Union


EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
ONE_MILLISECOND = datetime.timedelta(milliseconds=1)


def get_console_url(database_id: str) -> str:
    """Build the Upstash console URL of a database.

    Args:
        database_id: The ID of the database

    Returns:
        The console URL
    """
    return CONSOLE_URL_TEMPLATE.format(database_id)


def select_database_fields(database: Dict[str, Any]) -> Dict[str, Any]:
    """Reduce a database record to the fields exposed by the list tool.

    Args:
        database: Raw database record from the Upstash API

    Returns:
        The record restricted to LIST_DATABASE_FIELDS, in that order
    """
    return {field: database[field] for field in LIST_DATABASE_FIELDS if field in database}


def _parse_timestamp(value: str) -> datetime.datetime:
    try:
        parsed = datetime.datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        # e.g. "2024-05-22 10:59:00.000 +0000 UTC"
        if value.endswith(USAGE_TIMESTAMP_ZONE_SUFFIX):
            value = value[: -len(USAGE_TIMESTAMP_ZONE_SUFFIX)]
        for timestamp_format in USAGE_TIMESTAMP_FORMATS:
            try:
                parsed = datetime.datetime.strptime(value, timestamp_format)
                break
            except ValueError:
                continue
        else:
            raise ValueError(f'Invalid usage data timestamp: {value!r}')

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed


def to_epoch_millis(timestamp: Union[int, float, str]) -> int:
    """Convert a usage data timestamp to epoch milliseconds.

    Numbers are taken to be epoch milliseconds already. Strings may be
    ISO-8601 or the stats endpoint's own format; timestamps without an
    offset are read as UTC.

    Args:
        timestamp: The timestamp of a data point

    Returns:
        Milliseconds since the Unix epoch

    Raises:
        ValueError: The timestamp is neither a number nor a recognised string
    """
    if isinstance(timestamp, bool):
        raise ValueError(f'Invalid usage data timestamp: {timestamp!r}')
    if isinstance(timestamp, (int, float)):
        return int(timestamp)
    if isinstance(timestamp, str):
        return (_parse_timestamp(timestamp) - EPOCH) // ONE_MILLISECOND
    raise ValueError(f'Invalid usage data timestamp: {timestamp!r}')


def parse_usage_data(
    data_points: List[Dict[str, Any]], metric: str = 'usage series'
) -> Dict[str, Any]:
    """Normalize a usage time series.

    The last bucket of a series is still in progress and may carry a null
    value; in that case the series ends at the second to last point. A
    series made of a single null point ends where it starts.

    Args:
        data_points: Points shaped {'x': timestamp, 'y': value or None}, oldest first
        metric: Name of the series, used in error messages

    Returns:
        Dict with `start`, `end` and `data`, where `data` holds one
        [epoch_millis, value] pair per input point

    Raises:
        EmptyUsageDataError: The series has no points
    """
    if not data_points:
        raise EmptyUsageDataError(metric)

    last = data_points[-1]
    if last.get('y') is not None:
        end = last['x']
    elif len(data_points) > 1:
        end = data_points[-2]['x']
    else:
        end = data_points[0]['x']

    return {
        'start': data_points[0]['x'],
        'end': end,
        'data': [[to_epoch_millis(point['x']), point.get('y')] for point in data_points],
    }


def parse_command_counts(command_counts: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Normalize the per-command usage series.

    Args:
        command_counts: Entries shaped {'metric_identifier': command, 'data_points': [...]}

    Returns:
        One {'command', 'start', 'end', 'data'} entry per command, in input order
    """
    return [
        {
            'command': entry.get('metric_identifier'),
            **parse_usage_data(
                entry.get('data_points') or [], metric=str(entry.get('metric_identifier'))
            ),
        }
        for entry in command_counts
    ]
