"""Exception hierarchy for polynomial operations."""


class PolynomialError(Exception):
    """Base exception for polynomial operations."""

    pass


class DegreeError(PolynomialError, ValueError):
    """Raised when the degree of a polynomial cannot be determined.

    This occurs when:
    - The coefficient sequence is empty
    - The leading (highest degree) coefficient is zero
    """

    pass


class RootFindingError(PolynomialError, ArithmeticError):
    """Raised when the companion matrix eigenvalues cannot be computed.

    This occurs when:
    - The eigenvalue decomposition fails to converge
    - The normalized coefficients are not finite
    """

    pass
