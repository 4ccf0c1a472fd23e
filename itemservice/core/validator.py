from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from itemservice.core.errors import BindingErrors

logger = logging.getLogger(__name__)


class UnsupportedTypeError(TypeError):
    """A validator was handed a record type it does not declare."""

    def __init__(self, validator: Validator, target_type: type):
        self.validator = validator
        self.target_type = target_type
        super().__init__(
            f"{type(validator).__name__} does not support {target_type.__name__}"
        )


class Validator(ABC):
    """
    Subclasses declare the record types they accept in `supported_types`
    and append failures to the collector passed into `validate`.
    """

    supported_types: tuple[type, ...] = ()

    def supports(self, cls: type) -> bool:
        return isinstance(cls, type) and issubclass(cls, self.supported_types)

    def check_supported(self, target: Any) -> None:
        if not self.supports(type(target)):
            raise UnsupportedTypeError(self, type(target))

    @abstractmethod
    def validate(self, target: Any, errors: BindingErrors) -> None:
        ...


def invoke_validator(validator: Validator, target: Any, errors: BindingErrors) -> None:
    validator.check_supported(target)

    before = errors.error_count
    validator.validate(target, errors)

    added = errors.all_errors[before:]
    logger.debug(
        "%s rejected %s with %d error(s): %s",
        type(validator).__name__,
        errors.object_name,
        len(added),
        [e.code for e in added],
    )
