from presentation_service.domain_core.entities.presentation import Presentation, Slide

__all__ = ["Presentation", "Slide"]
