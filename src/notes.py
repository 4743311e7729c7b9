### this module contains the pitch model: the table of enharmonic spellings for each
### pitch class, and the Note, AbsoluteNote, and NoteList classes.
### Notes are spelled pitch classes in no particular octave, such as Eb or D#.
### AbsoluteNotes are spelled notes with an un-reduced semitone value counted
### upward from C, so that the E above a C tonic (4) is distinct from the E an octave higher (16).
### NoteLists are simply lists of either type of note, with some useful methods.

from .parsing import sh, fl, dsh, dfl
from .util import log, check_all
from . import parsing, tuning, _settings


#### the enharmonic spelling table.
# maps each pitch class to every valid spelling of it, most common first.
# each spelling of a pitch class uses a different natural letter,
# so that a pitch class and a letter together determine at most one name.
enharmonic_spellings = {
    0:  ['C',      f'B{sh}',  f'D{dfl}'],
    1:  [f'C{sh}', f'D{fl}'],
    2:  ['D',      f'C{dsh}', f'E{dfl}'],
    3:  [f'D{sh}', f'E{fl}',  f'F{dfl}'],
    4:  ['E',      f'D{dsh}', f'F{fl}'],
    5:  ['F',      f'E{sh}',  f'G{dfl}'],
    6:  [f'F{sh}', f'G{fl}'],
    7:  ['G',      f'F{dsh}', f'A{dfl}'],
    8:  [f'G{sh}', f'A{fl}'],
    9:  ['A',      f'G{dsh}', f'B{dfl}'],
    10: [f'A{sh}', f'B{fl}',  f'C{dfl}'],
    11: ['B',      f'A{dsh}', f'C{fl}'],
    }

# pitch classes of the 'white keys', i.e. the natural notes:
natural_positions = set(parsing.natural_note_positions.values())

def spellings_for(position):
    """returns the ordered list of valid note names for a pitch class,
    e.g. spellings_for(3) is ['D#', 'Eb', 'Fbb'].
    defined for every integer: values outside 0-11 are reduced modulo 12."""
    if isinstance(position, bool) or not isinstance(position, int):
        raise TypeError(f'spellings_for expects an integer pitch class, but got: {type(position)}')
    return list(enharmonic_spellings[position % 12])

def spelling_with_letter(position, letter):
    """returns the spelling of a pitch class that uses the desired natural letter,
    or None if there is no such spelling in the table"""
    for name in enharmonic_spellings[position % 12]:
        if name[0] == letter:
            return name
    return None

def preferred_name(position):
    """the common name of a pitch class, as used for the supported tonics"""
    return parsing.cast_note_name(_settings.COMMON_TONIC_NAMES[position % 12])


class Note:
    """a spelled pitch class, in no particular octave, such as: C or D# or Ebb"""
    def __init__(self, name=None, position=None):
        """a Note can be initialised in one of two ways:
            1. by passing to 'name' a valid note name, such as C or D# or Ebb
            2. by passing to 'position' an integer between 0 and 11 (inclusive),
                denoting a semitone offset from C, in which case the note is
                given its common name from _settings.COMMON_TONIC_NAMES."""

        if isinstance(name, Note):
            # accept re-casting: just take the input note's name
            name = name.name
        elif isinstance(name, int):
            # we've been passed a position int instead of a name, silently correct:
            position = name
            name = None

        self.name, self.position = self._parse_input(name, position)
        self.letter, self.accidental = parsing.parse_note_name(self.name)

        # a 'black' note is one whose pitch class is a black key on the piano,
        # regardless of spelling; B# is not black, but C# and Db are
        self.is_black = self.position not in natural_positions
        # a note is 'natural' if it is spelled without an accidental:
        self.natural = (self.accidental == 0)
        self.is_modified = not self.natural

    @staticmethod
    def _parse_input(name, position):
        # check that exactly one has been provided:
        if (name is not None) + (position is not None) != 1:
            raise ValueError("Argument to Note init must include exactly one of: name or position")
        if name is not None:
            if not isinstance(name, str):
                raise TypeError(f'expected str or int but received {type(name)} to initialise Note object')
            name = parsing.cast_note_name(name)
            position = parsing.note_name_position(name)
            if name not in enharmonic_spellings[position]:
                # e.g. triple accidentals, which the spelling table does not cover
                raise ValueError(f'{name} is not one of the supported spellings of pitch class {position}: {enharmonic_spellings[position]}')
        else:
            if isinstance(position, bool) or not isinstance(position, int):
                raise TypeError(f'Note position must be an int, but got: {type(position)}')
            position = position % 12
            name = preferred_name(position)
        return name, position

    @staticmethod
    def from_cache(name=None, position=None):
        """efficient note retrieval by name or position.
        every spelling in the table is pre-initialised, since there are so few"""
        if isinstance(name, Note):
            return name
        elif isinstance(name, int):
            position, name = name, None

        if name is not None:
            if isinstance(name, str) and name in cached_notes:
                return cached_notes[name]
            # might be an alternative spelling of an accidental, e.g. 'E♭':
            return cached_notes[Note(name).name]
        elif position is not None:
            return cached_notes[preferred_name(position)]
        else:
            raise ValueError(f'Note init from cache must include one of "name" or "position"')

    #### magic methods:
    def __add__(self, other):
        """addition with an integer is transposition by that many semitones,
        producing a Note with the common name of the resulting pitch class.
        (transposition alone cannot decide a spelling; see scales.build_scale for that)"""
        if isinstance(other, int):
            return Note.from_cache(position=(self.position + other) % 12)
        else:
            return NotImplemented

    def __sub__(self, other):
        """if 'other' is an integer, returns a new Note that is shifted down by that many semitones.
        if 'other' is another Note, return the upward semitone distance from other to self (0-11)."""
        if isinstance(other, Note):
            return (self.position - other.position) % 12
        elif isinstance(other, int):
            return Note.from_cache(position=(self.position - other) % 12)
        else:
            return NotImplemented

    def __eq__(self, other):
        """Notes are equal if they have the same spelling.
        for enharmonic equivalence (same pitch class), use the & operator."""
        if isinstance(other, str) and parsing.is_valid_note_name(other):
            other = Note(other)
        if isinstance(other, Note):
            return (self.name == other.name) and (self.position == other.position)
        elif other is None:
            return False
        else:
            return NotImplemented

    def __and__(self, other):
        """enharmonic equivalence: True if both notes are the same pitch class,
        e.g. Note('D#') & Note('Eb') is True"""
        if isinstance(other, str):
            other = Note.from_cache(other)
        if not isinstance(other, Note):
            raise TypeError(f'Enharmonic comparison is only defined between Notes, not {type(other)}')
        return self.position == other.position

    def __hash__(self):
        return hash(f'Note:{self.name}')

    @property
    def enharmonics(self):
        """the other spellings of this note's pitch class"""
        return [n for n in enharmonic_spellings[self.position] if n != self.name]

    def absolute(self, value=None):
        """the AbsoluteNote with this spelling at some absolute semitone value,
        which must reduce to this note's pitch class. defaults to the value in the first octave."""
        if value is None:
            value = self.position
        return AbsoluteNote(self.name, value)

    def __str__(self):
        # e.g. '♩C#'
        return f'{self._marker}{self.name}'

    def __repr__(self):
        return str(self)

    # Note object unicode identifier:
    _marker = _settings.MARKERS['Note']


class AbsoluteNote(Note):
    """a spelled note with an absolute semitone value, counted upward from C.
    the value is never reduced modulo 12: in a scale built on D (2),
    the fifth degree A has value 9 and the seventh degree C# has value 13."""
    def __init__(self, name, value):
        if isinstance(name, Note):
            name = name.name
        super().__init__(name=name)
        value = int(value)
        if value % 12 != self.position:
            raise ValueError(f'AbsoluteNote value {value} does not correspond to the pitch class of {self.name} ({self.position})')
        self.value = value
        self.octave = value // 12

    @property
    def semitone(self):
        return self.value

    @property
    def pitch(self):
        """frequency of this note in Hz, where value 0 is C4"""
        return tuning.pitch_class_to_frequency(self.value)

    @property
    def note(self):
        """the pitch-class Note with this spelling"""
        return Note.from_cache(self.name)

    def __add__(self, other):
        """addition with an integer moves this note up by that many semitones;
        whole octaves keep the spelling, anything else takes the common name"""
        if isinstance(other, int):
            new_value = self.value + other
            if other % 12 == 0:
                return AbsoluteNote(self.name, new_value)
            return AbsoluteNote(preferred_name(new_value), new_value)
        return NotImplemented

    def __sub__(self, other):
        """subtraction of another AbsoluteNote gives the (signed) distance in semitones"""
        if isinstance(other, AbsoluteNote):
            return self.value - other.value
        elif isinstance(other, int):
            return self + (-other)
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, AbsoluteNote):
            return (self.name == other.name) and (self.value == other.value)
        elif isinstance(other, Note):
            # an absolute note never equals a pitch-class note
            return False
        return super().__eq__(other)

    def __hash__(self):
        return hash(f'AbsoluteNote:{self.name}:{self.value}')

    def __lt__(self, other):
        if not isinstance(other, AbsoluteNote):
            return NotImplemented
        return self.value < other.value

    def __gt__(self, other):
        if not isinstance(other, AbsoluteNote):
            return NotImplemented
        return self.value > other.value

    def __str__(self):
        return f'{self._marker}{self.name}:{self.value}'

    _marker = _settings.MARKERS['AbsoluteNote']


class NoteList(list):
    """a list of Notes (or AbsoluteNotes), which may also hold None
    in the place of a note that could not be spelled"""
    def __init__(self, *items):
        if len(items) == 1 and isinstance(items[0], (list, tuple)):
            items = items[0]
        elif len(items) == 1 and isinstance(items[0], str) and not parsing.is_valid_note_name(items[0]):
            # a string of natural notes, like 'CEG':
            items = list(items[0])
        notes = [n if (n is None or isinstance(n, Note)) else Note.from_cache(n) for n in items]
        super().__init__(notes)

    @property
    def names(self):
        return [n.name if n is not None else None for n in self]

    @property
    def positions(self):
        return [n.position if n is not None else None for n in self]

    @property
    def letters(self):
        return [n.letter if n is not None else None for n in self]

    @property
    def complete(self):
        """True if every entry of this list is an actual note"""
        return check_all(self, 'isinstance', Note)

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{" ".join([n.name if n is not None else "?" for n in self])}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['NoteList']


# every spelling in the table, pre-initialised:
cached_notes = {name: Note(name) for names in enharmonic_spellings.values() for name in names}

# check the spelling table: each name must refer to its own pitch class,
# and no pitch class may have two spellings with the same letter
for position, names in enharmonic_spellings.items():
    letters = [n[0] for n in names]
    assert len(set(letters)) == len(letters), f'Pitch class {position} has repeated letters among its spellings: {names}'
    for n in names:
        assert parsing.note_name_position(n) == position, f'Spelling {n} does not belong to pitch class {position}'
log(f'Pitch model initialised with {len(cached_notes)} spellings')

# the twelve supported tonics, one per pitch class:
common_tonics = NoteList([Note.from_cache(position=p) for p in range(12)])

def common_tonic(position):
    """the supported tonic Note for a pitch class"""
    return common_tonics[position % 12]

# natural notes, for convenience:
C, D, E, F, G, A, B = [Note.from_cache(n) for n in parsing.natural_note_names]
