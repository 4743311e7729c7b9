from ..keys import *
from ..modes import Ionian, Dorian, Aeolian, HarmonicMinor
from ..notes import Note, NoteList, AbsoluteNote
from .testing_tools import compare
import pytest

def test_key_init():
    compare(Key('D dorian'), Key('Dorian', 'D'))
    compare(Key('D dorian'), Key(Dorian, Note('D')))
    compare(Key('Bb harmonic minor').mode, HarmonicMinor)
    compare(Key('Bb harmonic minor').tonic, Note('Bb'))
    compare(Key('F#').mode, Ionian)
    compare(Key('C natural minor').mode, Aeolian)
    compare(Key('Ionian', 3).tonic, Note('Eb'))
    compare(Key('D dorian').name, 'D Dorian')
    # spelling matters:
    compare(Key('Ionian', 'Db') == Key('Ionian', 'C#'), False)
    compare(len({Key('D dorian'), Key('Dorian', 'D'), Key('E dorian')}), 2)

    with pytest.raises(KeyError):
        Key('D bebop')
    with pytest.raises(ValueError):
        Key(Dorian)
    with pytest.raises(ValueError):
        Key('? major')
    with pytest.raises(TypeError):
        Key(Ionian, 'C') == 'C major'

def test_key_notes():
    k = Key('D dorian')
    compare(k.notes, NoteList('DEFGABC'))
    compare(k.complete, True)
    compare([n.value for n in k.absolute_notes], [2, 4, 5, 7, 9, 11, 12])
    compare(k.octave_notes()[-1], AbsoluteNote('D', 14))
    compare(len(k.octave_notes()), 8)
    compare(Note('F') in k, True)
    compare(Note('F#') in k, False)

    partial = Key('Lydian', 'B#')
    compare(partial.complete, False)
    compare(len(partial.absolute_notes), 6)
    compare(partial.notes[3], None)

def test_key_chords():
    compare(Key('C major').chords().names, ['C', 'Dm', 'Em', 'F', 'G', 'Am', 'Bdim'])
    compare(Key('C major').chords('seventh')[4].name, 'G7')
    compare(Key('A minor').chords().numerals, ['i', 'ii°', 'III', 'iv', 'v', 'VI', 'VII'])

def test_key_relatives():
    compare(Key('C major').relative_key, Key('A minor'))
    compare(Key('A minor').relative_key, Key('C major'))
    compare(Key('D dorian').relative('Mixolydian'), Key('G mixolydian'))
    compare(Key('A harmonic minor').relative_key, None)
    compare(Key('A harmonic minor').relative('Ionian'), None)
    compare(Key('E phrygian').parent_tonic, Note('C'))
    compare([str(k.tonic.name) for k in Key('E phrygian').relatives], ['C', 'D', 'E', 'F', 'G', 'A', 'B'])

def test_key_frequencies():
    freqs = Key('C major').frequencies()
    compare(len(freqs), 7)
    compare(float(freqs[0]), 261.63)
    compare(float(Key('C major').frequencies(octave=True)[-1]), 523.26, compare='close')
    compare(float(Key('A minor').frequencies()[0]), 440., compare='close')

def unit_test():
    test_key_init()
    test_key_notes()
    test_key_chords()
    test_key_relatives()
    test_key_frequencies()
