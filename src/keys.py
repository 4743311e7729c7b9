from . import parsing, tuning, _settings
from .notes import AbsoluteNote, NoteList
from .modes import Mode
from .scales import build_scale, build_scale_absolute, cast_mode, cast_tonic
from .chords import diatonic_chords
from . import relatives as rel
from .util import log


class Key:
    """a Mode that is rooted on a tonic, and therefore associated with a set of spelled notes"""
    def __init__(self, mode, tonic=None):
        """a Key can be initialised in one of two ways:

        1. from 'mode' and 'tonic' args, where mode is a Mode object or the name of one
            (like 'Dorian' or 'natural minor'), and tonic is a Note, note name or pitch class int.

        2. from 'mode' alone, as a proper Key name beginning with the tonic (like 'D dorian'
            or 'Bb harmonic minor'), in which case we split the tonic note from the string.
            a bare note name (like 'F#') is taken as the Ionian mode on that tonic."""
        self.mode, self.tonic = self._parse_input(mode, tonic)

    @staticmethod
    def _parse_input(mode, tonic):
        if tonic is None:
            if isinstance(mode, Mode):
                raise ValueError(f'Key initialised by Mode object ({mode.name}) but no tonic provided')
            elif not isinstance(mode, str):
                raise TypeError(f'Key init expects a key name string, or a mode and tonic, but got: {type(mode)}')
            tonic, mode_name = parsing.note_split(mode)
            if mode_name == '':
                mode_name = 'Ionian'
            mode = mode_name
        return cast_mode(mode), cast_tonic(tonic)

    @property
    def name(self):
        return f'{self.tonic.name} {self.mode.name}'

    @property
    def notes(self):
        """the seven spelled notes of this key; degrees that cannot be spelled are None"""
        return build_scale(self.mode, self.tonic)

    @property
    def absolute_notes(self):
        return build_scale_absolute(self.mode, self.tonic)

    @property
    def complete(self):
        """True if all seven degrees of this key can be spelled"""
        return self.notes.complete

    def octave_notes(self):
        """the absolute notes of this key, followed by the tonic an octave up"""
        abs_notes = self.absolute_notes
        octave = AbsoluteNote(self.tonic.name, self.tonic.position + 12)
        return NoteList(list(abs_notes) + [octave])

    def frequencies(self, octave=False):
        """the equal-tempered frequency in Hz of each note in this key,
        counting from C4, as a numpy array"""
        abs_notes = self.octave_notes() if octave else self.absolute_notes
        return tuning.frequencies([n.value for n in abs_notes])

    def chords(self, chord_type='triad'):
        """the ChordList of diatonic chords on each degree of this key"""
        return diatonic_chords(self.mode, self.tonic, chord_type)

    def relative(self, target):
        """the Key in the target mode that shares this key's pitch classes,
        or None if there is no such relative"""
        relative = rel.relative_of(self.mode, self.tonic, target)
        if relative is None:
            return None
        return Key(relative.mode, relative.tonic)

    @property
    def relative_key(self):
        """the relative minor of an Ionian key, or the relative major of another diatonic key"""
        relative = rel.relative_key(self.mode, self.tonic)
        if relative is None:
            log(f'{self.name} has no relative key')
            return None
        return Key(relative.mode, relative.tonic)

    @property
    def relatives(self):
        return [Key(r.mode, r.tonic) for r in rel.relatives(self.mode, self.tonic)]

    @property
    def parent_tonic(self):
        return rel.parent_tonic(self.mode, self.tonic)

    def __contains__(self, item):
        """a Note is in this Key if its spelling is one of the key's notes"""
        return item in [n for n in self.notes if n is not None]

    def __eq__(self, other):
        if isinstance(other, Key):
            return (self.mode == other.mode) and (self.tonic == other.tonic)
        else:
            raise TypeError(f'__eq__ not defined between Key and {type(other)}')

    def __hash__(self):
        """Keys hash by their mode and their tonic"""
        return hash((self.mode, self.tonic))

    def __str__(self):
        return f'{self._marker}Key of {self.name}'

    def __repr__(self):
        return f'{str(self)}  {self.notes}'

    _marker = _settings.MARKERS['Key']
