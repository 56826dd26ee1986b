"""Transform modules for the reference DCT."""

from .errors import InvalidDimensionError
from .dct import normalization_coefficient, create_dct_matrix, forward_dct, inverse_dct
from .matrix_utils import as_matrix, check_even_dimensions, prepare_output

__all__ = [
    'InvalidDimensionError',
    'normalization_coefficient',
    'create_dct_matrix',
    'forward_dct',
    'inverse_dct',
    'as_matrix',
    'check_even_dimensions',
    'prepare_output',
]
