### this module spells the notes of a mode built on a given tonic.
### every heptatonic scale uses each of the seven natural letters exactly once,
### so we choose each degree's spelling by its letter, and never by its pitch class alone:
### the third degree of B major is D#, not Eb, because the third letter up from B is D.

from .notes import Note, AbsoluteNote, NoteList, common_tonic, spelling_with_letter
from .modes import Mode, get_mode
from .parsing import natural_note_names
from .util import log, rotate_list


def cast_tonic(tonic):
    """accepts a Note, a note name like 'Eb', or an integer pitch class,
    and returns the corresponding Note.
    pitch class integers are given the common tonic spelling for that pitch class."""
    if isinstance(tonic, Note):
        return Note.from_cache(tonic.name)
    elif isinstance(tonic, bool):
        raise TypeError(f'Expected a tonic Note, note name or pitch class, but got: {tonic}')
    elif isinstance(tonic, int):
        return common_tonic(tonic)
    elif isinstance(tonic, str):
        return Note.from_cache(tonic)
    else:
        raise TypeError(f'Expected a tonic Note, note name or pitch class, but got: {type(tonic)}')

def cast_mode(mode):
    """accepts a Mode object or the name of one in the catalog"""
    if isinstance(mode, Mode):
        return mode
    return get_mode(mode)


def degree_letters(tonic):
    """the natural letter of each degree of a heptatonic scale on this tonic,
    e.g. for tonic Eb: ['E', 'F', 'G', 'A', 'B', 'C', 'D']"""
    tonic = cast_tonic(tonic)
    return rotate_list(natural_note_names, natural_note_names.index(tonic.letter))

def build_scale(mode, tonic):
    """returns a NoteList of the seven notes of 'mode' built on 'tonic',
    each spelled with its own natural letter in cyclic order from the tonic's letter.

    a degree whose pitch class has no spelling with the required letter
    (for example the fourth degree of B# lydian, which would need E##)
    is given as None in the output, rather than misspelled.
    so the result always has 7 entries, and callers should check
    NoteList.complete before treating it as a full scale."""
    mode, tonic = cast_mode(mode), cast_tonic(tonic)
    letters = degree_letters(tonic)

    scale_notes = []
    for i, (interval, letter) in enumerate(zip(mode.intervals, letters)):
        target_position = (tonic.position + interval.value) % 12
        name = spelling_with_letter(target_position, letter)
        if name is None:
            log(f'Cannot spell degree {i+1} of {tonic.name} {mode.name}: no spelling of pitch class {target_position} uses the letter {letter}')
            scale_notes.append(None)
        else:
            scale_notes.append(Note.from_cache(name))
    return NoteList(scale_notes)

def build_scale_absolute(mode, tonic):
    """as build_scale, but returns AbsoluteNotes whose values are the tonic's position
    plus each interval's offset, without reducing mod 12, so the values are strictly increasing.
    degrees that cannot be spelled are left out, so a partial scale has fewer than 7 entries.

    since every offset is below 12, the caller may append the octave at tonic+12
    without colliding with any degree."""
    mode, tonic = cast_mode(mode), cast_tonic(tonic)
    scale_notes = build_scale(mode, tonic)

    abs_notes = []
    for note, interval in zip(scale_notes, mode.intervals):
        if note is not None:
            abs_notes.append(AbsoluteNote(note.name, tonic.position + interval.value))
    abs_notes = NoteList(abs_notes)
    assert all([abs_notes[i].value < abs_notes[i+1].value for i in range(len(abs_notes)-1)]), f'Absolute scale is not strictly increasing: {abs_notes}'
    return abs_notes
