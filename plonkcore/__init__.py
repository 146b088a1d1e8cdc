"""Field arithmetic, FFT domains, polynomials, gate constraints, a circuit
builder and a compact circuit encoding for PLONK over BLS12-381."""

__version__ = "0.1.0"

__all__ = [
    "builder",
    "compress",
    "constraint",
    "domain",
    "errors",
    "evaluations",
    "field",
    "hades",
    "polynomial",
    "witness",
]