"""
Ellipsoid Models and Geocentric/Geodetic Conversion.

This module defines the reference ellipsoids and converts between geodetic
coordinates (longitude, latitude, ellipsoidal height) and Earth-Centered
Earth-Fixed (ECEF) Cartesian coordinates.

Model
-----
GRS80, the ellipsoid of JGD2000/JGD2011, is the default. Every converter in
the package takes the ellipsoid as an argument so the same model is used end
to end; no datum shift is ever applied.

Conventions
-----------
- Geodetic tuples are (longitude, latitude) in radians.
- Heights and ECEF components are in meters.
- The ECEF X-axis passes through (0°, 0°), Y through (90°E, 0°), Z through
  the North Pole.

References
----------
- Hofmann-Wellenhof, B. et al. (2008). GNSS. Section 5.6.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from coordinate_transformer.common.constants import PhysicalConstants
from coordinate_transformer.common.logging_config import get_logger

logger = get_logger(__name__)

# Below this distance from the Z-axis (m) longitude is undefined
_AXIS_EPSILON_M = 1e-10


@dataclass(frozen=True)
class EllipsoidParameters:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    e2 : float
        First eccentricity squared: e² = (a² - b²) / a²
    ep2 : float
        Second eccentricity squared: e'² = (a² - b²) / b²
    n : float
        Third flattening: n = (a - b) / (a + b)
    """
    a: float
    f: float
    name: str

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)

    @property
    def ep2(self) -> float:
        """Second eccentricity squared."""
        return self.e2 / (1 - self.e2)

    @property
    def n(self) -> float:
        """Third flattening, the expansion parameter of the Gauss-Krüger series."""
        return self.f / (2 - self.f)


GRS80Ellipsoid = EllipsoidParameters(
    a=PhysicalConstants.EARTH_SEMI_MAJOR_AXIS.value,
    f=1.0 / PhysicalConstants.GRS80_INVERSE_FLATTENING.value,
    name="GRS80"
)

WGS84Ellipsoid = EllipsoidParameters(
    a=PhysicalConstants.EARTH_SEMI_MAJOR_AXIS.value,
    f=1.0 / PhysicalConstants.WGS84_INVERSE_FLATTENING.value,
    name="WGS84"
)


@dataclass(frozen=True)
class EcefSolverConfig:
    """Configuration of the iterative ECEF to geodetic solver.

    Attributes
    ----------
    max_iterations : int
        Upper bound on latitude refinements.
    tolerance : float
        Convergence tolerance on latitude in radians.
    """
    max_iterations: int = 10
    tolerance: float = 1e-12


def radius_of_curvature_meridian(
    latitude_rad: float,
    ellipsoid: EllipsoidParameters = GRS80Ellipsoid
) -> float:
    """Compute the radius of curvature in the meridian plane.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: GRS80).

    Returns
    -------
    float
        Radius of curvature M in meters.

    Notes
    -----
    M = a(1 - e²) / (1 - e² sin²φ)^(3/2)
    """
    sin_lat = np.sin(latitude_rad)
    denominator = (1 - ellipsoid.e2 * sin_lat**2) ** 1.5
    return float(ellipsoid.a * (1 - ellipsoid.e2) / denominator)


def radius_of_curvature_prime_vertical(
    latitude_rad: float,
    ellipsoid: EllipsoidParameters = GRS80Ellipsoid
) -> float:
    """Compute the radius of curvature in the prime vertical.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: GRS80).

    Returns
    -------
    float
        Radius of curvature N in meters.

    Notes
    -----
    N = a / (1 - e² sin²φ)^(1/2)

    At the equator N = a; at the poles N = a² / b.
    """
    sin_lat = np.sin(latitude_rad)
    return float(ellipsoid.a / np.sqrt(1 - ellipsoid.e2 * sin_lat**2))


def llz2xyz(
    ll: Tuple[float, float],
    height: float = 0.0,
    ellipsoid: EllipsoidParameters = GRS80Ellipsoid
) -> Tuple[float, float, float]:
    """Convert geodetic coordinates to ECEF.

    Parameters
    ----------
    ll : Tuple[float, float]
        (longitude, latitude) in radians.
    height : float
        Height above the ellipsoid in meters.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: GRS80).

    Returns
    -------
    Tuple[float, float, float]
        (X, Y, Z) in meters.

    Raises
    ------
    ValueError
        If latitude lies outside [-π/2, π/2].

    Examples
    --------
    >>> x, y, z = llz2xyz((np.radians(140.0), np.radians(36.0)), 100.0)
    >>> round(x, 1), round(y, 1), round(z, 1)
    (-3957446.6, 3320692.0, 3728250.5)
    """
    longitude_rad, latitude_rad = ll

    if not -np.pi / 2 <= latitude_rad <= np.pi / 2:
        raise ValueError(
            f"Latitude {latitude_rad} rad out of range [-π/2, π/2]. "
            f"Did you pass degrees instead of radians?"
        )

    sin_lat = np.sin(latitude_rad)
    cos_lat = np.cos(latitude_rad)

    N = radius_of_curvature_prime_vertical(latitude_rad, ellipsoid)

    X = (N + height) * cos_lat * np.cos(longitude_rad)
    Y = (N + height) * cos_lat * np.sin(longitude_rad)
    Z = (N * (1 - ellipsoid.e2) + height) * sin_lat

    return float(X), float(Y), float(Z)


def xyz2llz(
    xyz: Tuple[float, float, float],
    ellipsoid: EllipsoidParameters = GRS80Ellipsoid,
    config: EcefSolverConfig = EcefSolverConfig()
) -> Tuple[Tuple[float, float], float]:
    """Convert ECEF coordinates to geodetic coordinates.

    Iterates latitude to a fixed point of
    phi = atan2(Z + e² N(phi) sin(phi), p), starting from the zero-height guess.

    Parameters
    ----------
    xyz : Tuple[float, float, float]
        (X, Y, Z) in meters.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: GRS80).
    config : EcefSolverConfig
        Iteration bound and tolerance.

    Returns
    -------
    Tuple[Tuple[float, float], float]
        ((longitude_rad, latitude_rad), height_m)

    Notes
    -----
    On the polar axis (distance to the Z-axis below 1e-10 m) longitude is
    undefined; 0.0 is returned, latitude is ±π/2 following the sign of Z
    (+π/2 for Z == 0) and height is |Z| - b.

    The iteration typically converges in 2-3 steps near the surface. If it
    has not converged within `config.max_iterations` the last iterate is
    returned and a warning is logged.
    """
    X, Y, Z = xyz

    p = np.hypot(X, Y)

    if p < _AXIS_EPSILON_M:
        latitude_rad = np.pi / 2 if Z >= 0 else -np.pi / 2
        return (0.0, float(latitude_rad)), float(np.abs(Z) - ellipsoid.b)

    longitude_rad = np.arctan2(Y, X)

    # Initial approximation ignoring height
    latitude_rad = np.arctan2(Z, p * (1 - ellipsoid.e2))

    for _ in range(config.max_iterations):
        sin_lat = np.sin(latitude_rad)
        N = radius_of_curvature_prime_vertical(latitude_rad, ellipsoid)

        latitude_new = np.arctan2(Z + ellipsoid.e2 * N * sin_lat, p)

        if np.abs(latitude_new - latitude_rad) < config.tolerance:
            latitude_rad = latitude_new
            break

        latitude_rad = latitude_new
    else:
        logger.warning(
            f"Latitude did not converge within {config.max_iterations} "
            f"iterations for ECEF ({X}, {Y}, {Z})"
        )

    sin_lat = np.sin(latitude_rad)
    cos_lat = np.cos(latitude_rad)
    N = radius_of_curvature_prime_vertical(latitude_rad, ellipsoid)

    if np.abs(cos_lat) > 1e-10:
        height_m = p / cos_lat - N
    else:
        height_m = np.abs(Z) / np.abs(sin_lat) - N * (1 - ellipsoid.e2)

    return (float(longitude_rad), float(latitude_rad)), float(height_m)
