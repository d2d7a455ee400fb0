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

"""Custom exceptions for the Upstash Redis MCP Server."""

from .constants import ERROR_EMPTY_USAGE_DATA


class UpstashMCPException(Exception):
    """Base exception for Upstash MCP Server."""

    pass


class ReadOnlyModeException(UpstashMCPException):
    """Exception raised when a write operation is attempted in read-only mode."""

    def __init__(self, operation: str):
        """Initialize the ReadOnlyModeException.

        Args:
            operation: The name of the operation that was attempted
        """
        self.operation = operation
        super().__init__(
            f"Operation '{operation}' requires write access. The server is currently in read-only mode."
        )


class EmptyUsageDataError(UpstashMCPException):
    """Exception raised when the stats endpoint returns a series without data points."""

    def __init__(self, metric: str = 'usage series'):
        """Initialize the EmptyUsageDataError.

        Args:
            metric: The metric or command whose series was empty
        """
        self.metric = metric
        super().__init__(ERROR_EMPTY_USAGE_DATA.format(metric))
