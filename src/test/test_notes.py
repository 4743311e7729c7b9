from ..notes import *
from .testing_tools import compare
import pytest

def test_spelling_table():
    compare(spellings_for(0), ['C', 'B#', 'Dbb'])
    compare(spellings_for(3), ['D#', 'Eb', 'Fbb'])
    compare(spellings_for(6), ['F#', 'Gb'])
    # reduced mod 12:
    compare(spellings_for(15), spellings_for(3))
    compare(spellings_for(-1), ['B', 'A##', 'Cb'])
    with pytest.raises(TypeError):
        spellings_for('C')
    with pytest.raises(TypeError):
        spellings_for(True)

    for position in range(12):
        names = spellings_for(position)
        letters = [n[0] for n in names]
        # letters are unique per pitch class:
        compare(len(set(letters)), len(letters))
        # and every name refers back to its own pitch class:
        compare([Note(n).position for n in names], [position]*len(names))

    compare(spelling_with_letter(3, 'D'), 'D#')
    compare(spelling_with_letter(3, 'E'), 'Eb')
    compare(spelling_with_letter(2, 'E'), 'Ebb')
    compare(spelling_with_letter(4, 'D'), 'D##')
    compare(spelling_with_letter(6, 'E'), None)

def test_notes():
    compare(Note('Eb').position, 3)
    compare(Note('Eb').letter, 'E')
    compare(Note('Eb').accidental, -1)
    compare(Note('B#').position, 0)
    compare(Note(position=6).name, 'F#')
    compare(Note(position=10).name, 'Bb')
    compare(Note(8).name, 'Ab')

    # spelling equality and enharmonic equivalence:
    compare(Note('D#') == Note('Eb'), False)
    compare(Note('D#'), Note('Eb'), compare='enharmonic')
    compare(Note('Ebb'), Note('C𝄪'), compare='enharmonic')
    compare(Note('E♭'), Note('Eb'))
    compare(Note('E'), 'E')

    # black keys depend on pitch class, not spelling:
    compare(Note('C#').is_black, True)
    compare(Note('B#').is_black, False)
    compare(Note('B#').is_modified, True)
    compare(Note('G').natural, True)

    compare(Note('D#').enharmonics, ['Eb', 'Fbb'])

    with pytest.raises(ValueError):
        Note('E###')
    with pytest.raises(ValueError):
        Note('H')
    with pytest.raises(TypeError):
        Note(3.5)

def test_note_arithmetic():
    compare(C + 2, D)
    compare(D - 2, C)
    compare(D - C, 2)
    compare(C - D, 10)
    compare(B + 1, C)
    compare(C + 3, Note('Eb'))
    compare(Note.from_cache('D#') is Note.from_cache('D#'), True)

def test_absolute_notes():
    cs = AbsoluteNote('C#', 13)
    compare(cs.position, 1)
    compare(cs.octave, 1)
    compare(cs.semitone, 13)
    compare(cs.note, Note('C#'))
    compare(cs + 12, AbsoluteNote('C#', 25))
    compare(cs + 2, AbsoluteNote('Eb', 15))
    compare(cs - AbsoluteNote('A', 9), 4)
    compare(AbsoluteNote('A', 9) < cs, True)
    compare(Note('A').absolute(21), AbsoluteNote('A', 21))
    compare(AbsoluteNote('C', 0) == Note('C'), False)
    with pytest.raises(ValueError):
        AbsoluteNote('C#', 12)

def test_note_lists():
    compare(NoteList('CEG'), NoteList(['C', 'E', 'G']))
    compare(NoteList('CEG'), NoteList('C', 'E', 'G'))
    compare(NoteList('C', 'Eb', 'G').positions, [0, 3, 7])
    compare(NoteList('C', 'Eb', 'G').names, ['C', 'Eb', 'G'])
    compare(NoteList(['C', None, 'G']).complete, False)
    compare(NoteList(['C', None, 'G']).names, ['C', None, 'G'])
    compare(NoteList('CEG').complete, True)

def test_common_tonics():
    compare(common_tonics.names, ['C', 'Db', 'D', 'Eb', 'E', 'F', 'F#', 'G', 'Ab', 'A', 'Bb', 'B'])
    compare(common_tonic(9), Note('A'))
    compare(common_tonic(13), Note('Db'))

def unit_test():
    test_spelling_table()
    test_notes()
    test_note_arithmetic()
    test_absolute_notes()
    test_note_lists()
    test_common_tonics()
