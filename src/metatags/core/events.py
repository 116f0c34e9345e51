"""Pre-operation events and the hooks that receive them.

A pre-event is emitted right before an operation runs and records who asked
for what. Delivery is fire-and-forget: GuardedHook is the boundary that keeps
a failing hook from affecting the operation it describes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from metatags.core.names import DottedName

logger = logging.getLogger(__name__)


class OperationType(str, Enum):
    """Operations that emit a pre-event."""

    LIST_TAGS = "LIST_TAGS"


@dataclass(frozen=True)
class OperationContext:
    """
    Identity of a requested operation.

    Attributes:
        user: Principal performing the operation.
        metalake: Metalake the operation runs in.
        identifier: Name segments of the target, metalake first.
        operation_type: What is about to happen.
    """

    user: str
    metalake: str
    identifier: tuple[str, ...]
    operation_type: OperationType

    @property
    def full_name(self) -> str:
        return ".".join(self.identifier)


class PreEventHook(Protocol):
    """Receiver of pre-operation events."""

    def notify(self, context: OperationContext) -> None:
        """Handle a pre-event. The return value is ignored."""
        ...


def list_tags_event(user: str, metalake: str, name: DottedName) -> OperationContext:
    """Build the pre-event for listing the tags of an entity."""
    return OperationContext(
        user=user,
        metalake=metalake,
        identifier=(metalake, *name.parts()),
        operation_type=OperationType.LIST_TAGS,
    )


class LoggingPreEventHook:
    """Hook that writes every pre-event to the log at DEBUG level."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logging.getLogger("metatags.events")

    def notify(self, context: OperationContext) -> None:
        self.log.debug(
            "pre-event %s user=%s target=%s",
            context.operation_type.value,
            context.user,
            context.full_name,
        )


class RecordingPreEventHook:
    """Hook that keeps every received pre-event in memory."""

    def __init__(self) -> None:
        self.events: list[OperationContext] = []

    def notify(self, context: OperationContext) -> None:
        self.events.append(context)


class GuardedHook:
    """
    Fire-and-forget wrapper around a PreEventHook.

    Calls the wrapped hook synchronously and absorbs anything it raises, so
    the caller always continues with its own work. A missing hook is a no-op.
    """

    def __init__(self, hook: PreEventHook | None) -> None:
        self.hook = hook

    def notify(self, context: OperationContext) -> None:
        if self.hook is None:
            return
        try:
            self.hook.notify(context)
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Pre-event hook failed for %s on '%s': %s",
                context.operation_type.value,
                context.full_name,
                exc,
            )
