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

"""Upstash Redis MCP Server implementation."""

import argparse
import os
import sys
import upstash.redis_mcp_server.tools  # noqa: F401 - imported for side effects to register tools
from upstash.redis_mcp_server.common.connection import UpstashConnectionManager
from upstash.redis_mcp_server.common.context import UpstashContext
from upstash.redis_mcp_server.common.server import SERVER_VERSION, mcp
from loguru import logger


def main():
    """Run the MCP server with CLI argument support."""
    parser = argparse.ArgumentParser(
        description='An MCP server for managing Upstash Redis databases'
    )
    parser.add_argument('--port', type=int, default=8888, help='Port to run the server on')
    parser.add_argument(
        '--email',
        type=str,
        default=os.environ.get('UPSTASH_EMAIL'),
        help='Upstash account email (defaults to UPSTASH_EMAIL)',
    )
    parser.add_argument(
        '--api-key',
        type=str,
        default=os.environ.get('UPSTASH_API_KEY'),
        help='Upstash management API key (defaults to UPSTASH_API_KEY)',
    )
    parser.add_argument(
        '--api-base-url',
        type=str,
        default=None,
        help='Base URL of the Upstash management API',
    )
    parser.add_argument(
        '--readonly',
        default=False,
        action=argparse.BooleanOptionalAction,
        help='Prevents the MCP server from performing mutating operations',
    )

    args = parser.parse_args()
    logger.remove()
    logger.add(sys.stderr, level=os.environ.get('FASTMCP_LOG_LEVEL', 'INFO'))

    # init connection manager and context
    UpstashConnectionManager.initialize(
        email=args.email, api_key=args.api_key, base_url=args.api_base_url
    )
    UpstashContext.initialize(readonly=args.readonly)

    # config server port
    mcp.settings.port = args.port

    # logger info
    logger.info(f'Starting Upstash Redis MCP Server v{SERVER_VERSION}')
    logger.info(f'API: {UpstashConnectionManager.get_base_url()}')
    logger.info(f'Read-only mode: {UpstashContext.readonly_mode()}')

    mcp.run()


if __name__ == '__main__':
    main()
