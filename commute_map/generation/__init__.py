from .random_points import PointGenerator, RandomSource, generate_houses

__all__ = ["PointGenerator", "RandomSource", "generate_houses"]
