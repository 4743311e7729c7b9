from ._settings import C4_PITCH
from .util import log
import numpy as np

# 12-TET ('equal') tuning only:
# each semitone multiplies frequency by the twelfth root of two,
# so the notes from root to octave are evenly spaced on a log scale.

def pitch_class_to_frequency(semitone, reference=C4_PITCH):
    """returns the frequency in Hz of the note that is 'semitone' steps above C4,
    by the equal temperament formula: f = reference * 2^(n/12).
    semitone need not be reduced mod 12: 12 is C5, -12 is C3."""
    return float(reference * np.exp2(semitone / 12))

def frequencies(semitones, reference=C4_PITCH):
    """vectorised form of pitch_class_to_frequency:
    accepts an iterable of semitone values, returns a numpy array of frequencies in Hz"""
    semitones = np.asarray(list(semitones), dtype=float)
    freqs = reference * np.exp2(semitones / 12)
    log(f'Frequencies for semitones {semitones.tolist()}: {np.round(freqs, 2).tolist()}')
    return freqs
