"""
Pipeline service contract.

Indicator engine, display builder and chart packer all follow it. They hold
no state between calls: every call recomputes from its input.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT")
ResultT = TypeVar("ResultT")


class BaseService(ABC, Generic[RequestT, ResultT]):
    """
    Typed request -> result step of the chart pipeline.

    Subclasses name themselves and implement `execute`; callers go through
    `run`, which applies `validate_input` first.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Used in log lines and error messages."""

    @abstractmethod
    async def execute(self, input_data: RequestT) -> ResultT:
        """
        Produce the result for an already validated request.

        Raises:
            ServiceError: The request is well-formed but cannot be served
        """

    async def validate_input(self, input_data: RequestT) -> RequestT:
        """Semantic checks beyond the schema. Returns the request unchanged."""
        return input_data

    async def health_check(self) -> bool:
        # No external dependencies to probe
        return True

    async def run(self, input_data: RequestT) -> ResultT:
        request = await self.validate_input(input_data)
        logger.debug(f"{self.name}: executing")
        return await self.execute(request)


class ServiceError(Exception):
    """A pipeline service refused a request."""

    def __init__(
        self, service_name: str, message: str, details: Optional[dict[str, Any]] = None
    ):
        super().__init__(f"{service_name}: {message}")
        self.service_name = service_name
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Error body for the HTTP layer."""
        return {"service": self.service_name, "message": self.message, **self.details}


class EmptySeriesError(ServiceError):
    """A caller-supplied series has no bars."""
