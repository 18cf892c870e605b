from .solver import solve, hint, Solver, NO_HINT
from .dictionary import Dictionary, load_dictionary

__version__ = '0.1.0'
