"""
Schema rules value object.

Built once at startup and handed to the store and slide manager.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SchemaRules:
    min_title_length: int = 3
    min_author_length: int = 3
    min_authors: int = 1
    min_topic_length: int = 3
    min_body_length: int = 3

    @classmethod
    def from_settings(cls, settings) -> "SchemaRules":
        return cls(
            min_title_length=settings.min_title_length,
            min_author_length=settings.min_author_length,
            min_authors=settings.min_authors,
            min_topic_length=settings.min_topic_length,
            min_body_length=settings.min_body_length,
        )
