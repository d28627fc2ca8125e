"""Classification of slice normals into canonical orientations.

Two classifiers are provided:

classify(normal)
    Tolerance-aware classifier used for patient-space normals.  Magnitudes
    that agree to within :data:`~mri_coordinates.constants.TIE_TOLERANCE`
    are resolved through a fixed rule table so the result does not depend
    on the last digits reported by the scanner.
orientation_from_direction_cosines(dc)
    Plain argmax of the squared components, used for device-space
    direction cosines.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, NamedTuple, Tuple

import numpy as np

from .constants import TIE_TOLERANCE
from .validators import as_vector3

logger = logging.getLogger(__name__)


class Orientation(enum.IntEnum):
    """Canonical slice orientation; the value is the index of the dominant axis."""

    SAGITTAL = 0
    CORONAL = 1
    TRANSVERSAL = 2


class _Magnitudes(NamedTuple):
    sag: float
    cor: float
    tra: float
    sag_cor: bool
    sag_tra: bool
    cor_tra: bool


def _resolve_sag_cor(m: _Magnitudes) -> Orientation:
    if m.sag_tra:
        return Orientation.TRANSVERSAL
    return Orientation.CORONAL if m.sag < m.tra else Orientation.TRANSVERSAL


def _resolve_argmax(m: _Magnitudes) -> Orientation:
    return Orientation(int(np.argmax((m.sag, m.cor, m.tra))))


_Rule = Tuple[str, Callable[[_Magnitudes], bool], Callable[[_Magnitudes], Orientation]]

# (name, predicate, resolver), evaluated top to bottom; first match wins.
_RULES: Tuple[_Rule, ...] = (
    (
        "all-tied",
        lambda m: m.sag_cor and m.sag_tra and m.cor_tra,
        lambda m: Orientation.TRANSVERSAL,
    ),
    (
        "sag-cor-tied",
        lambda m: m.sag_cor and not m.cor_tra,
        _resolve_sag_cor,
    ),
    (
        "sag-tra-tied",
        lambda m: m.sag_tra,
        lambda m: Orientation.CORONAL if m.sag < m.cor else Orientation.TRANSVERSAL,
    ),
    (
        "cor-tra-tied",
        lambda m: m.cor_tra,
        lambda m: Orientation.SAGITTAL if m.cor < m.sag else Orientation.TRANSVERSAL,
    ),
    (
        "argmax",
        lambda m: True,
        _resolve_argmax,
    ),
)


def _magnitudes(normal, tol: float) -> _Magnitudes:
    vec = as_vector3(normal, "normal")
    if not np.any(vec):
        raise ValueError("normal has zero length")
    sag, cor, tra = (float(c) for c in np.abs(vec))
    return _Magnitudes(
        sag,
        cor,
        tra,
        abs(sag - cor) <= tol,
        abs(sag - tra) <= tol,
        abs(cor - tra) <= tol,
    )


def _apply_rules(normal, tol: float) -> Tuple[str, Orientation]:
    m = _magnitudes(normal, tol)
    for name, matches, resolve in _RULES:
        if matches(m):
            return name, resolve(m)
    raise AssertionError("orientation rule table is not exhaustive")


def classification_rule(normal, tol: float = TIE_TOLERANCE) -> str:
    """Return the name of the rule that decides the orientation of ``normal``."""
    return _apply_rules(normal, tol)[0]


def classify(normal, tol: float = TIE_TOLERANCE) -> Orientation:
    """Return the canonical orientation best describing ``normal``.

    Parameters
    ----------
    normal : array_like, shape (3,)
        Slice normal as (sagittal, coronal, transversal) components.  Only
        magnitudes are compared so the vector need not be normalised.
    tol : float, optional
        Absolute difference below which two magnitudes count as equal.

    Returns
    -------
    Orientation
        Always one of the three canonical orientations.

    Raises
    ------
    ValueError
        If ``normal`` is not a finite, non-zero 3-vector.
    """
    rule, orientation = _apply_rules(normal, tol)
    logger.debug("classified %s as %s (rule %s)", normal, orientation.name, rule)
    return orientation


def orientation_from_direction_cosines(dc) -> Orientation:
    """Orientation of device-space direction cosines by largest squared component.

    No tie tolerance is applied; exact ties go to the lowest axis index.
    """
    vec = as_vector3(dc, "direction cosines")
    if not np.any(vec):
        raise ValueError("direction cosines have zero length")
    return Orientation(int(np.argmax(vec ** 2)))


__all__ = [
    "Orientation",
    "classification_rule",
    "classify",
    "orientation_from_direction_cosines",
]
