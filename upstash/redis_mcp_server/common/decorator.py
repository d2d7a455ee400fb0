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

"""Decorators used by the Upstash Redis MCP Server."""

import httpx
from ..constants import (
    ERROR_HTTP_STATUS,
    ERROR_TRANSPORT,
    ERROR_UNEXPECTED,
    READ_OPERATION_PREFIXES,
)
from ..exceptions import EmptyUsageDataError, ReadOnlyModeException
from .context import UpstashContext
from functools import wraps
from inspect import iscoroutinefunction
from loguru import logger
from typing import Any, Callable


def handle_exceptions(func: Callable) -> Callable:
    """Decorator to log exceptions raised by MCP operations.

    Every failure is logged according to its kind and then re-raised
    unchanged, so the MCP host receives the original error as the outcome
    of the tool call. Nothing is retried.

    Args:
        func: The function to wrap

    Returns:
        The wrapped function that logs exceptions
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any):
        try:
            if iscoroutinefunction(func):
                # If the decorated function is a coroutine, await it
                return await func(*args, **kwargs)
            return func(*args, **kwargs)
        except ReadOnlyModeException as error:
            logger.warning(f'Operation blocked in readonly mode: {error.operation}')
            raise
        except httpx.HTTPStatusError as error:
            logger.error(
                f'{func.__name__} failed: '
                + ERROR_HTTP_STATUS.format(error.response.status_code, error.response.text)
            )
            raise
        except httpx.HTTPError as error:
            logger.error(f'{func.__name__} failed: ' + ERROR_TRANSPORT.format(str(error)))
            raise
        except EmptyUsageDataError as error:
            logger.error(f'{func.__name__} received malformed usage data: {error}')
            raise
        except Exception as error:
            logger.exception(f'{func.__name__} failed: ' + ERROR_UNEXPECTED.format(str(error)))
            raise

    return wrapper


def readonly_check(func: Callable) -> Callable:
    """Decorator to check if operation is allowed in readonly mode.

    This decorator automatically checks if the server is in readonly mode
    and blocks write operations before any request is sent. It determines
    the operation type from the function name.

    Args:
        func: The function to wrap

    Returns:
        The wrapped function that checks readonly mode
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any):
        func_name = func.__name__.lower()
        is_read_operation = func_name.startswith(READ_OPERATION_PREFIXES)

        if not is_read_operation and UpstashContext.readonly_mode():
            raise ReadOnlyModeException(func.__name__)

        if iscoroutinefunction(func):
            return await func(*args, **kwargs)
        return func(*args, **kwargs)

    return wrapper
