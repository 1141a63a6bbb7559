from presentation_service.domain_core.validators.presentation_validators import (
    PresentationValidators,
)
from presentation_service.domain_core.validators.slide_validators import SlideValidators

__all__ = ["PresentationValidators", "SlideValidators"]
