### this module derives the diatonic chords of a mode on some tonic:
### the triad (or seventh chord) stacked in thirds on each of its seven degrees,
### classified by the semitone distances of its members above the root.

from .qualities import Quality, Major, Minor, Augmented, Diminished
from .notes import NoteList
from .scales import build_scale, cast_mode, cast_tonic
from .parsing import numerals_roman, fl
from .util import log, ModDict
from . import _settings

unknown_char = _settings.CHARACTERS['unknown_chord']
dim_char = _settings.CHARACTERS['diminished']
hdim_char = _settings.CHARACTERS['half_diminished']
aug_char = _settings.CHARACTERS['augmented']

chord_types = ('triad', 'seventh')

# semitones above the root of (third, fifth), for each triad quality:
triad_qualities = {(4, 7): Major,
                   (3, 7): Minor,
                   (3, 6): Diminished,
                   (4, 8): Augmented}

# triad quality labels and chord name suffixes, keyed by quality value:
triad_labels = {Major.value: 'Major', Minor.value: 'minor',
                Diminished.value: 'diminished', Augmented.value: 'augmented'}
triad_suffixes = {Major.value: '', Minor.value: 'm',
                  Diminished.value: 'dim', Augmented.value: 'aug'}

# (triad quality value, semitones from root to seventh) mapped to:
# (quality label, chord name suffix, numeral suffix)
seventh_qualities = {(Major.value, 11):      ('Major Seventh',      'maj7',         'maj7'),
                     (Major.value, 10):      ('Dominant Seventh',   '7',            '7'),
                     (Minor.value, 10):      ('minor Seventh',      'm7',           '7'),
                     (Diminished.value, 10): ('Half-Diminished',    f'm7{fl}5',     f'{hdim_char}7'),
                     (Diminished.value, 9):  ('Diminished Seventh', 'dim7',         f'{dim_char}7'),
                     }

# the generic labels given to chords whose intervals match none of the above:
unclassified_triad_label = 'Unclassified'
unclassified_seventh_label = 'Seventh Chord'
unknown_label = 'Unknown'


def classify_triad(third, fifth):
    """returns the Quality (Major, Minor, Diminished or Augmented) of a triad whose third and fifth
    lie the given numbers of semitones above its root, or None if they match no triad quality."""
    return triad_qualities.get((third % 12, fifth % 12), None)

def classify_seventh(triad, seventh):
    """accepts a triad Quality (or None) and the semitone distance from root to seventh,
    and returns the (label, name suffix, numeral suffix) tuple of that seventh chord,
    or None if the combination matches no seventh chord quality."""
    if triad is None:
        return None
    triad = Quality.from_cache(triad)
    return seventh_qualities.get((triad.value, seventh % 12), None)

def degree_numeral(degree, triad=None):
    """the bare roman numeral of a scale degree, cased by triad quality:
    upper case for major and augmented (or unclassified) chords, lower case for minor and diminished"""
    numeral = numerals_roman[degree]
    if triad is not None and (triad.minor or triad.diminished):
        numeral = numeral.lower()
    return numeral


class Chord:
    """a chord built on one degree of a scale, from notes of that scale.
    holds its display name (like 'Dm7'), roman numeral (like 'ii7'), quality label
    (like 'minor Seventh') and the notes themselves, root first.

    a Chord whose notes could not all be spelled is 'unknown': it has no notes,
    and its name and numeral are the unknown character alone.
    a Chord whose intervals match no known quality is 'unclassified': it keeps its notes,
    but its name and numeral are marked with the unknown character."""
    def __init__(self, notes, degree, quality, name, numeral, classified=True):
        self.notes = NoteList(notes)
        self.degree = degree
        self.quality = quality
        self.name = name
        self.numeral = numeral
        self.classified = classified

    @staticmethod
    def unknown(degree):
        """the placeholder chord for a degree whose notes could not all be spelled"""
        return Chord([], degree, unknown_label, unknown_char, unknown_char, classified=False)

    @staticmethod
    def from_notes(notes, degree):
        """classifies a stack of 3 or 4 notes (root, third, fifth and optionally seventh)
        built on a scale degree, and returns the resulting Chord"""
        notes = NoteList(notes)
        if len(notes) not in (3, 4):
            raise ValueError(f'Chords are built from 3 or 4 notes, but got {len(notes)}: {notes}')
        root = notes[0]
        third, fifth = notes[1] - root, notes[2] - root
        triad = classify_triad(third, fifth)

        if len(notes) == 3:
            if triad is not None:
                label = triad_labels[triad.value]
                name = f'{root.name}{triad_suffixes[triad.value]}'
                numeral = degree_numeral(degree, triad)
                if triad.diminished:
                    numeral += dim_char
                elif triad.augmented:
                    numeral += aug_char
                return Chord(notes, degree, label, name, numeral)
            else:
                log(f'Triad on degree {degree} with intervals {[0, third, fifth]} matches no known quality')
                return Chord(notes, degree, unclassified_triad_label,
                             f'{root.name}{unknown_char}', f'{degree_numeral(degree)}{unknown_char}',
                             classified=False)
        else:
            seventh = notes[3] - root
            seventh_quality = classify_seventh(triad, seventh)
            if seventh_quality is not None:
                label, name_suffix, numeral_suffix = seventh_quality
                return Chord(notes, degree, label, f'{root.name}{name_suffix}',
                             f'{degree_numeral(degree, triad)}{numeral_suffix}')
            else:
                log(f'Seventh chord on degree {degree} with intervals {[0, third, fifth, seventh]} matches no known quality')
                return Chord(notes, degree, unclassified_seventh_label,
                             f'{root.name}{unknown_char}', f'{degree_numeral(degree, triad)}{unknown_char}',
                             classified=False)

    @property
    def is_unknown(self):
        return len(self.notes) == 0

    @property
    def root(self):
        return self.notes[0] if not self.is_unknown else None

    @property
    def intervals(self):
        """semitone distance of each note above the root"""
        return [n - self.root for n in self.notes]

    def __len__(self):
        return len(self.notes)

    def __eq__(self, other):
        if not isinstance(other, Chord):
            return NotImplemented
        return (self.name == other.name) and (self.notes == other.notes) and (self.degree == other.degree)

    def __hash__(self):
        return hash((self.name, tuple(self.notes.names), self.degree))

    def __str__(self):
        return f'{self._marker}{self.name} ({self.numeral}) {self.notes}'

    def __repr__(self):
        return str(self)

    _marker = _settings.MARKERS['Chord']


class ChordList(list):
    """a list of Chords, one per scale degree"""
    @property
    def names(self):
        return [c.name for c in self]

    @property
    def numerals(self):
        return [c.numeral for c in self]

    @property
    def qualities(self):
        return [c.quality for c in self]

    @property
    def complete(self):
        return not any([c.is_unknown for c in self])

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{"  ".join(self.names)}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['ChordList']


def diatonic_chords(mode, tonic, chord_type='triad'):
    """returns a ChordList of the seven chords built on each degree of 'mode' on 'tonic'.
    chord_type is 'triad' (stacking degrees i, i+2, i+4) or 'seventh' (also i+6),
    where degrees wrap around the top of the scale.

    the list always has seven entries: where any note of a chord could not be spelled,
    that chord is the unknown placeholder (see Chord.unknown)."""
    if chord_type not in chord_types:
        raise ValueError(f'chord_type must be one of {chord_types}, but got: {chord_type!r}')
    mode, tonic = cast_mode(mode), cast_tonic(tonic)

    scale_notes = build_scale(mode, tonic)
    # lookup by degree number, wrapping past the seventh degree:
    degree_notes = ModDict({d: n for d, n in enumerate(scale_notes, start=1)}, index=1)
    stack = [0, 2, 4] if chord_type == 'triad' else [0, 2, 4, 6]

    chords = []
    for degree in range(1, 8):
        chord_notes = [degree_notes[degree + s] for s in stack]
        if None in chord_notes:
            log(f'Cannot build {chord_type} on degree {degree} of {tonic.name} {mode.name}: unspelled note in {chord_notes}')
            chords.append(Chord.unknown(degree))
        else:
            chords.append(Chord.from_notes(chord_notes, degree))
    return ChordList(chords)
