"""Classified results for point-of-sale and reporting workflows.

Workflow handlers never raise into the presentation layer. Each call
returns an Outcome whose ``kind`` tells the caller how to present it;
the wording lives in ``message`` and ``warnings``.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from backoffice.domain.exceptions import (
    EntityNotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger("backoffice.workflow")


class OutcomeKind(Enum):
    SUCCESS = "success"
    INFO = "info"
    VALIDATION_ERROR = "validation-error"
    STORE_ERROR = "store-error"
    UNEXPECTED_ERROR = "unexpected-error"


@dataclass(frozen=True)
class Outcome:

    kind: OutcomeKind
    message: str
    payload: Any = None
    warnings: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.kind in (OutcomeKind.SUCCESS, OutcomeKind.INFO)

    # --- Factories ------------------------------------------------------------

    @classmethod
    def success(cls, message: str, payload: Any = None, warnings: tuple[str, ...] = ()) -> Outcome:
        return cls(OutcomeKind.SUCCESS, message, payload, tuple(warnings))

    @classmethod
    def info(cls, message: str, payload: Any = None) -> Outcome:
        return cls(OutcomeKind.INFO, message, payload)

    @classmethod
    def validation_error(cls, message: str) -> Outcome:
        return cls(OutcomeKind.VALIDATION_ERROR, message)

    @classmethod
    def store_error(cls, message: str, payload: Any = None) -> Outcome:
        return cls(OutcomeKind.STORE_ERROR, message, payload)

    @classmethod
    def unexpected_error(cls, message: str) -> Outcome:
        return cls(OutcomeKind.UNEXPECTED_ERROR, message)


def workflow(action: str, empty: Callable[[], Any] | None = None):
    """Decorate a handler method so every exception becomes an Outcome.

    ``action`` names the workflow in messages and logs. ``empty`` builds
    the payload returned alongside a store error, so views can render an
    empty result instead of nothing.
    """

    def decorator(func: Callable[..., Outcome]) -> Callable[..., Outcome]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Outcome:
            try:
                return func(*args, **kwargs)
            except (ValidationError, EntityNotFoundError) as exc:
                return Outcome.validation_error(str(exc))
            except StoreError as exc:
                logger.error("%s failed: %s", action, exc)
                payload = empty() if empty is not None else None
                return Outcome.store_error(f"Failed to {action}: {exc}", payload)
            except Exception:
                logger.exception("Unexpected error during %s", action)
                return Outcome.unexpected_error(
                    f"An unexpected error occurred while trying to {action}."
                )

        return wrapper

    return decorator
