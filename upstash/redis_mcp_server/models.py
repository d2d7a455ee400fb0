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

"""Input types shared by the Upstash Redis database tools."""

from typing import Literal


# keep in sync with constants.READ_REGIONS
Region = Literal[
    'us-east-1',
    'us-west-1',
    'us-west-2',
    'eu-west-1',
    'eu-central-1',
    'ap-southeast-1',
    'ap-southeast-2',
    'sa-east-1',
]

StatsPeriod = Literal['1h', '3h', '12h', '1d', '3d', '7d']

StatsType = Literal[
    'read_latency_mean',
    'write_latency_mean',
    'keyspace',
    'throughput',
    'daily_net_commands',
    'diskusage',
    'command_counts',
]
