"""
sRGB to CIE L*a*b* conversion (D65) and CIE76 color difference.
"""

import numpy as np
from skimage import color


def rgb_to_lab(rgb) -> np.ndarray:
    """Convert 8-bit sRGB values (..., 3) to L*a*b* (..., 3)."""
    rgb = np.asarray(rgb)
    flat = rgb.reshape(-1, 1, 3).astype(np.float64) / 255.0
    lab = color.rgb2lab(flat, illuminant="D65")  # shape: (N, 1, 3)
    return lab.reshape(rgb.shape)


def delta_e76(lab: np.ndarray, reference_lab) -> np.ndarray:
    """Euclidean distance in L*a*b* between every color and one reference."""
    reference = np.broadcast_to(np.asarray(reference_lab, dtype=np.float64), lab.shape)
    return color.deltaE_cie76(lab, reference)
