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

"""Tools for Upstash Redis database operations."""

from .create_database import create_database
from .delete_database import delete_database
from .list_databases import list_databases
from .get_database_details import get_database_details
from .update_regions import update_database_regions
from .reset_password import reset_database_password
from .get_usage_stats import get_database_usage_stats

__all__ = [
    'create_database',
    'delete_database',
    'list_databases',
    'get_database_details',
    'update_database_regions',
    'reset_database_password',
    'get_database_usage_stats',
]
