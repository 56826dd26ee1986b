"""Constants for the reference DCT."""

import numpy as np

# Both matrix dimensions must be a multiple of this
DIMENSION_MULTIPLE = 2

# Element type of freshly allocated output matrices
OUTPUT_DTYPE = np.float64

# Combined relative/absolute per-cell tolerance for round-trip checks
ROUNDTRIP_TOLERANCE = 1e-10
