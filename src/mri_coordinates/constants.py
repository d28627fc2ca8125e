"""Numeric tolerances shared by the coordinate transforms.

TIE_TOLERANCE
    Largest absolute difference between two direction-cosine magnitudes that
    is still treated as a tie by the orientation classifier.  Scanners report
    direction cosines with six decimal digits, so magnitudes closer than this
    cannot be told apart.

DEGENERATE_EPSILON
    Smallest norm accepted for the in-plane projection of the partition
    direction when constructing the line axis.  Anything smaller means the
    normal lies on the axis excluded by the orientation and no line axis can
    be chosen.
"""

TIE_TOLERANCE = 1e-6
DEGENERATE_EPSILON = 1e-12
