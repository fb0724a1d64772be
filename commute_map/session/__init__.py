from .state import OfficeSnapshot
from .office import OfficeSession

__all__ = ["OfficeSnapshot", "OfficeSession"]
