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

"""Context management for Upstash Redis MCP Server."""


class UpstashContext:
    """Context class for Upstash Redis MCP Server."""

    _readonly = False

    @classmethod
    def initialize(cls, readonly: bool = False):
        """Initialize the context.

        Args:
            readonly (bool): Whether to run in readonly mode. Defaults to False.
        """
        cls._readonly = readonly

    @classmethod
    def readonly_mode(cls) -> bool:
        """Check if the server is running in readonly mode.

        Returns:
            True if readonly mode is enabled, False otherwise
        """
        return cls._readonly
