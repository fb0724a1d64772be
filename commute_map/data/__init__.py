from .loader import load_points, save_points

__all__ = ["load_points", "save_points"]
