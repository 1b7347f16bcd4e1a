"""Full-grid generation and clue reduction."""

from .generator import Generator
from .pipeline import generate_puzzle
from .reducer import Reducer
from .shuffle import shuffle

__all__ = ["Generator", "Reducer", "generate_puzzle", "shuffle"]
