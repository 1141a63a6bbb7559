"""
Domain validators for slide-related business rules.
"""

import re
from typing import Any

from presentation_service.domain_core.errors import SlideIndexError, ValidationError
from presentation_service.domain_core.value_objects.schema_rules import SchemaRules

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


class SlideValidators:
    @staticmethod
    def _validate_text(name: str, value: Any, min_length: int) -> None:
        if value is None:
            raise ValidationError(f'"{name}" is required')

        if not isinstance(value, str):
            raise ValidationError(f'"{name}" must be a string')

        if len(value) < min_length:
            raise ValidationError(
                f'"{name}" length must be at least {min_length} characters long'
            )

    @staticmethod
    def validate_slide_input(
        topic: Any, body: Any, rules: SchemaRules = SchemaRules()
    ) -> None:
        """Validate slide topic and body meet business requirements."""
        SlideValidators._validate_text("topic", topic, rules.min_topic_length)
        SlideValidators._validate_text("body", body, rules.min_body_length)

    @staticmethod
    def parse_index(index: Any) -> int:
        """Parse a slide index from an int or a decimal string."""
        if isinstance(index, bool):
            raise SlideIndexError(index)

        if isinstance(index, int):
            return index

        if isinstance(index, str) and _INTEGER_PATTERN.match(index.strip()):
            return int(index.strip())

        raise SlideIndexError(index)

    @staticmethod
    def validate_index(index: Any, length: int) -> int:
        """Validate slide index is within the current bounds and return it."""
        position = SlideValidators.parse_index(index)

        if position < 0 or position >= length:
            raise SlideIndexError(index)

        return position
