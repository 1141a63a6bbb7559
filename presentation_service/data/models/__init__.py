from presentation_service.data.models.base import Base
from presentation_service.data.models.presentation_model import PresentationModel

__all__ = ["Base", "PresentationModel"]
