from .settings import MapSettings, RingStyle
from .paths import output_path

__all__ = ["MapSettings", "RingStyle", "output_path"]
