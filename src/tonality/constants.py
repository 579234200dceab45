"""
Constants for the line-of-fifths model.

No magic numbers - every window bound and delta used by the arithmetic lives here.
"""


# Tonal pitch class coordinates on the line of fifths.
# Fbb is the flattest spelling, Bss the sharpest; C sits at 14.
TPC_MIN = -1
TPC_MAX = 33
TPC_C = 14

# Adding DELTA_SEMITONE keeps the step and raises the alteration by one.
DELTA_SEMITONE = 7

# Adding DELTA_ENHARMONIC lands on an enharmonic respelling (C -> B#).
DELTA_ENHARMONIC = 12

# Number of diatonic steps (and of pitch classes in a diatonic collection)
NUM_STEPS = 7

# Alterations: double flat .. double sharp
ALTERATION_MIN = -2
ALTERATION_MAX = 2

# Intervals as offsets on the line of fifths: Dim2 (-12) .. Aug7 (+12)
INTERVAL_MIN = -12
INTERVAL_MAX = 12

# Key signatures: Cb major (7 flats) .. C# major (7 sharps)
KEY_MIN = -7
KEY_MAX = 7

# Distance on the line of fifths from a major tonic to its relative minor tonic
RELATIVE_MINOR_OFFSET = 3

# Lowest coordinate of a key's diatonic collection, relative to its major tonic
DIATONIC_LOW_OFFSET = -1


class ErrorMessages:
    """Standardized error messages."""

    INVALID_INTERVAL = "Interval offset must be {low}..{high} on the line of fifths, got {fifths}."
    INVALID_DEGREE = "Degree must be 1-7, got {degree}."
    INVALID_SCALE = "Scale must hold one interval per size 1-7 in order, got {sizes}."
    INVALID_INVERSION = "Inversion must be 0-{high}, got {inversion}."
