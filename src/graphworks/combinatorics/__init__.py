from .colex import Combination, combination_count, reverse_colex_combinations

__all__ = [
    "Combination",
    "combination_count",
    "reverse_colex_combinations",
]
