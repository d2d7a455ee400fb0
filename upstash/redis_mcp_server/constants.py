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

"""Constants for Upstash Redis MCP Server."""

# Error Messages
ERROR_READONLY_MODE = (
    'This operation requires write access. The server is currently in read-only mode.'
)
ERROR_HTTP_STATUS = 'Upstash API returned HTTP {}: {}'
ERROR_TRANSPORT = 'Request to Upstash API failed: {}'
ERROR_UNEXPECTED = 'Unexpected error: {}'
ERROR_EMPTY_USAGE_DATA = 'Usage data for {} contains no data points'

# Success Messages
SUCCESS_CREATED = 'Successfully created {}'
SUCCESS_DELETED = 'Database deleted successfully.'

# Upstash API
DEFAULT_API_BASE_URL = 'https://api.upstash.com'
DEFAULT_CONNECT_TIMEOUT = 5
DEFAULT_READ_TIMEOUT = 10
CONSOLE_URL_TEMPLATE = 'https://console.upstash.com/redis/{}'
GLOBAL_DATABASE_REGION = 'global'

PATH_DATABASE = 'v2/redis/database'
PATH_DATABASES = 'v2/redis/databases'
PATH_UPDATE_REGIONS = 'v2/redis/update-regions'
PATH_RESET_PASSWORD = 'v2/redis/reset-password'
PATH_STATS = 'v2/redis/stats'

# Read regions
READ_REGIONS = [
    'us-east-1',
    'us-west-1',
    'us-west-2',
    'eu-west-1',
    'eu-central-1',
    'ap-southeast-1',
    'ap-southeast-2',
    'sa-east-1',
]
READ_REGIONS_DESCRIPTION = f'Available regions: {", ".join(READ_REGIONS)}'

# Usage statistics
STATS_PERIODS = ['1h', '3h', '12h', '1d', '3d', '7d']
STATS_TYPES = [
    'read_latency_mean',
    'write_latency_mean',
    'keyspace',
    'throughput',
    'daily_net_commands',
    'diskusage',
    'command_counts',
]
STATS_TYPE_COMMAND_COUNTS = 'command_counts'

# Timestamp formats used by the stats endpoint, e.g. "2024-05-22 10:59:00.5 +0000 UTC"
USAGE_TIMESTAMP_FORMATS = ('%Y-%m-%d %H:%M:%S.%f %z', '%Y-%m-%d %H:%M:%S %z')
USAGE_TIMESTAMP_ZONE_SUFFIX = ' UTC'

# Fields kept when listing databases. Changing this list changes the tool output contract.
LIST_DATABASE_FIELDS = (
    'database_id',
    'database_name',
    'database_type',
    'region',
    'type',
    'primary_region',
    'read_regions',
    'creation_time',
    'budget',
    'state',
    'password',
    'endpoint',
    'rest_token',
    'read_only_rest_token',
    'db_acl_enabled',
    'db_acl_default_user_status',
)

# Operation Categories
READ_OPERATION_PREFIXES = ('list', 'get')

# Tool description fragments
GENERIC_DATABASE_NOTES = (
    "\nNOTE: Don't show the database ID from the response to the user "
    'unless explicitly asked or needed.\n'
)

# Database identifiers are single path segments; "." and ".." would be removed as dot segments
DATABASE_ID_PATTERN = r'^([^.]|\.[^.]|\.\..)'
DOT_SEGMENTS = ('.', '..')
