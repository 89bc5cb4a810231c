"""Fractal noise used to build landmass height fields."""

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage


def _smoothed_white_noise(
    width: int,
    height: int,
    rng: np.random.Generator,
    wavelength: float,
) -> NDArray[np.float32]:
    """Generate one octave of smooth noise by blurring white noise.

    Args:
        width: Output width.
        height: Output height.
        rng: Random number generator for this octave.
        wavelength: Approximate feature size in tiles.

    Returns:
        2D noise array in range roughly [-1, 1].
    """
    white = rng.standard_normal((height, width)).astype(np.float32)

    # Wrap horizontally and vertically so octaves tile seamlessly
    sigma = max(wavelength / 3.0, 0.5)
    smoothed = ndimage.gaussian_filter(white, sigma=sigma, mode="wrap")

    std = np.std(smoothed)
    if std > 0:
        smoothed /= (2.5 * std)

    return smoothed


def fbm_noise(
    width: int,
    height: int,
    seed: int,
    base_wavelength: float,
    octaves: int = 4,
    lacunarity: float = 2.0,
    gain: float = 0.5,
) -> NDArray[np.float32]:
    """Generate fractal Brownian motion noise.

    Each octave halves the wavelength (by default) and the amplitude,
    and draws from its own generator so octaves are independent.

    Args:
        width: Output width in tiles.
        height: Output height in tiles.
        seed: Seed for the octave generators.
        base_wavelength: Wavelength of the lowest octave in tiles.
        octaves: Number of noise layers to sum.
        lacunarity: Wavelength divisor between octaves.
        gain: Amplitude multiplier between octaves.

    Returns:
        2D float32 array of shape (height, width), roughly in [-1, 1].
    """
    result = np.zeros((height, width), dtype=np.float32)
    if width == 0 or height == 0:
        return result

    wavelength = base_wavelength
    amplitude = 1.0
    total_amplitude = 0.0

    for i in range(octaves):
        octave_rng = np.random.default_rng([seed, i])
        result += amplitude * _smoothed_white_noise(width, height, octave_rng, wavelength)
        total_amplitude += amplitude
        wavelength /= lacunarity
        amplitude *= gain

    if total_amplitude > 0:
        result /= total_amplitude
    return result


def normalize_unit(values: NDArray[np.float32]) -> NDArray[np.float32]:
    """Rescale an array linearly into [0, 1].

    A constant (or empty) array maps to all zeros.
    """
    if values.size == 0:
        return values.astype(np.float32)

    low = float(np.min(values))
    high = float(np.max(values))
    if high <= low:
        return np.zeros_like(values, dtype=np.float32)
    return ((values - low) / (high - low)).astype(np.float32)
