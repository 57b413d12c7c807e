"""Linear plate models and radial distortion of tangent-plane coordinates."""

from typing import Sequence, Tuple

Model = Tuple[float, float, float, float, float, float]


def invf(fwds: Sequence[float]) -> Model:
    """Invert a linear model relating two sets of [x, y] coordinates.

    The model ``(A, B, C, D, E, F)`` maps ``x2 = A + B*x1 + C*y1`` and
    ``y2 = D + E*x1 + F*y1``.  The returned coefficients ``(P, Q, R, S, T, U)``
    map back: ``x1 = P + Q*x2 + R*y2`` and ``y1 = S + T*x2 + U*y2``.

    Raises ValueError if the model has no inverse.
    """
    coeffs = tuple(float(c) for c in fwds)
    if len(coeffs) != 6:
        raise ValueError(f"expected 6 model coefficients, got {len(coeffs)}")
    a, b, c, d, e, f = coeffs
    det = b * f - c * e
    if det == 0.0:
        raise ValueError("linear model is singular and has no inverse")
    return (
        (c * d - a * f) / det,
        f / det,
        -c / det,
        (a * e - b * d) / det,
        -e / det,
        b / det,
    )


def pcd(disco: float, x: float, y: float) -> Tuple[float, float]:
    """Apply pincushion/barrel distortion to a tangent-plane [x, y].

    The distortion is ``RP = R*(1 + C*R**2)`` with ``C`` the ``disco``
    coefficient: positive for pincushion, negative for barrel.
    Returns the distorted ``(x, y)``.
    """
    f = 1.0 + disco * (x * x + y * y)
    return x * f, y * f