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

"""Common MCP server configuration."""

from mcp.server.fastmcp import FastMCP

SERVER_VERSION = '0.1.0'

SERVER_INSTRUCTIONS = """
This server provides management capabilities for Upstash Redis databases through the Upstash management API.

Key capabilities:
- Database Management: Create, delete, and list Redis databases
- Replication: Replace the read regions of a global database
- Credentials: Reset the password of a database
- Information Access: View database details, limits, and usage statistics over a period of time

Never reveal database IDs, passwords, or tokens to the user unless they explicitly ask for them.

Always verify database identifiers and understand the impact of operations before executing them.
"""

SERVER_DEPENDENCIES = ['httpx', 'pydantic', 'loguru']

# FastMCP instance
mcp = FastMCP(
    'upstash.redis-mcp-server',
    instructions=SERVER_INSTRUCTIONS,
    dependencies=SERVER_DEPENDENCIES,
)
