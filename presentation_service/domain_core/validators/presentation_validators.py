"""
Domain validators for presentation-related business rules.
"""

from typing import Any

from presentation_service.domain_core.errors import ValidationError
from presentation_service.domain_core.value_objects.schema_rules import SchemaRules


class PresentationValidators:
    @staticmethod
    def validate_title(title: Any, rules: SchemaRules = SchemaRules()) -> None:
        """Validate presentation title meets business requirements."""
        if title is None:
            raise ValidationError('"title" is required')

        if not isinstance(title, str):
            raise ValidationError('"title" must be a string')

        if len(title) < rules.min_title_length:
            raise ValidationError(
                f'"title" length must be at least {rules.min_title_length} characters long'
            )

    @staticmethod
    def validate_authors(authors: Any, rules: SchemaRules = SchemaRules()) -> None:
        """Validate the author list: non-empty, every entry a long-enough string."""
        if authors is None:
            raise ValidationError('"authors" is required')

        if isinstance(authors, (str, bytes)) or not isinstance(authors, (list, tuple)):
            raise ValidationError('"authors" must be an array')

        if len(authors) < rules.min_authors:
            raise ValidationError(
                f'"authors" must contain at least {rules.min_authors} items'
            )

        for i, author in enumerate(authors):
            if not isinstance(author, str):
                raise ValidationError(f'"authors[{i}]" must be a string')

            if len(author) < rules.min_author_length:
                raise ValidationError(
                    f'"authors[{i}]" length must be at least '
                    f"{rules.min_author_length} characters long"
                )

    @staticmethod
    def validate_presentation_input(
        title: Any, authors: Any, rules: SchemaRules = SchemaRules()
    ) -> None:
        PresentationValidators.validate_title(title, rules)
        PresentationValidators.validate_authors(authors, rules)
