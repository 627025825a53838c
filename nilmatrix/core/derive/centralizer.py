"""derive/centralizer.py - Centralizers in gl(n)."""

from ..base import nonzero_coefficients
from ..gl import GL
from ..space import VectorSpace
from ...log import get_logger

logger = get_logger(__name__)


def centralizer(N, W: VectorSpace, gl: GL) -> VectorSpace:
    """
    Return the elements of W that commute with N.

    Args:
        N: an element of gl
        W: a subspace of gl
        gl: gl(n)
    """
    commutator = gl.commutator(N, W.generic_element())
    equations = nonzero_coefficients([commutator])
    result = W.subspace_from_equations(equations)
    logger.debug("centralizer: %d equations, dimension %d inside dimension %d",
                 len(equations), result.dimension, W.dimension)
    return result


__all__ = ['centralizer']
