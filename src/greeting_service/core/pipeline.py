"""Greeting pipeline: turns a GreetingRequest into a GreetingResponse.

Transformations run in a fixed order and each one records its tag:
prefix, language, username, suffix, uppercase, truncation, timestamp.
The clock and server-id generator are injected so tests can pin them.
"""
from __future__ import annotations
import logging
import uuid
from datetime import datetime, timedelta
from typing import Any, Callable

from greeting_service.common.languages import greeting_for
from greeting_service.common.schema import (
    GreetingConfiguration,
    GreetingRequest,
    GreetingResponse,
    ProcessingMetadata,
    ResponseStatus,
    Transformation,
)

LOGGER = logging.getLogger("greeting.core.pipeline")

VERSION = "1.0.0"
SIMPLE_SERVER_ID = "server-simple"

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def random_token() -> str:
    """Return 8 random hex characters."""
    return uuid.uuid4().hex[:8]


def _elapsed_ms(start: datetime, end: datetime) -> int:
    return max(0, (end - start) // timedelta(milliseconds=1))


class GreetingPipeline:
    def __init__(self, clock: Clock = datetime.now, id_factory: IdFactory = random_token) -> None:
        self.clock = clock
        self.id_factory = id_factory

    def process(self, request: GreetingRequest) -> GreetingResponse:
        start = self.clock()
        config = request.configuration or GreetingConfiguration()
        user = request.user_context
        parts: list[str] = []
        applied: list[str] = []

        if config.prefix:
            parts.append(config.prefix + " ")
            applied.append(Transformation.PREFIX_APPLIED.value)

        parts.append(greeting_for(config.language))
        applied.append(Transformation.LANGUAGE_TRANSLATED.value)

        if user is not None and user.username is not None:
            parts.append(" " + user.username)
            applied.append(Transformation.USERNAME_ADDED.value)

        if config.suffix:
            parts.append(" " + config.suffix)
            applied.append(Transformation.SUFFIX_APPLIED.value)

        message = "".join(parts)
        if config.uppercase:
            message = message.upper()
            applied.append(Transformation.UPPERCASE_APPLIED.value)

        if config.max_length > 0 and len(message) > config.max_length:
            message = message[: config.max_length] + "..."
            applied.append(Transformation.TRUNCATED.value)

        if config.include_timestamp:
            message = f"{message} [{self.clock().isoformat()}]"
            applied.append(Transformation.TIMESTAMP_ADDED.value)

        processing_ms = _elapsed_ms(start, self.clock())

        metadata = ProcessingMetadata(
            processing_time_ms=processing_ms,
            server_id=f"server-{self.id_factory()}",
            version=VERSION,
            retry_count=0,
            debug_info={
                "requestPriority": request.priority.value,
                "tagsCount": str(len(request.tags) if request.tags is not None else 0),
                "metadataKeys": ",".join(request.metadata) if request.metadata is not None else "",
            },
        )
        additional: dict[str, Any] = {
            "requestTimestamp": request.timestamp,
            "userRoles": user.roles if user is not None else [],
            "tags": request.tags,
        }
        LOGGER.debug("Processed greeting in %sms: %s", processing_ms, applied)
        return GreetingResponse(
            message=message,
            processing_metadata=metadata,
            status=ResponseStatus.SUCCESS,
            applied_transformations=applied,
            additional_data=additional,
            response_timestamp=self.clock(),
        )

    def simple(self, name: str) -> GreetingResponse:
        """Greet a single name with the fixed "Hello <name>!" template."""
        start = self.clock()
        message = f"Hello {name}!"
        metadata = ProcessingMetadata(
            processing_time_ms=_elapsed_ms(start, self.clock()),
            server_id=SIMPLE_SERVER_ID,
            version=VERSION,
            retry_count=0,
            debug_info={"endpoint": "simple"},
        )
        return GreetingResponse(
            message=message,
            processing_metadata=metadata,
            status=ResponseStatus.SUCCESS,
            applied_transformations=[Transformation.SIMPLE_GREETING.value],
            additional_data={"inputName": name},
            response_timestamp=self.clock(),
        )


_DEFAULT = GreetingPipeline()


def process(request: GreetingRequest) -> GreetingResponse:
    return _DEFAULT.process(request)


def simple_greeting(name: str) -> GreetingResponse:
    return _DEFAULT.simple(name)
