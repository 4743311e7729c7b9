from ..chords import *
from ..modes import all_modes, Ionian, Aeolian, Lydian, HarmonicMinor
from ..notes import Note, NoteList, common_tonics
from ..qualities import Major, Minor, Diminished, Augmented
from .testing_tools import compare
import pytest

def test_classification():
    compare(classify_triad(4, 7), Major)
    compare(classify_triad(3, 7), Minor)
    compare(classify_triad(3, 6), Diminished)
    compare(classify_triad(4, 8), Augmented)
    compare(classify_triad(2, 7), None)
    compare(classify_seventh(Major, 11)[0], 'Major Seventh')
    compare(classify_seventh(Major, 10)[0], 'Dominant Seventh')
    compare(classify_seventh(Minor, 10)[0], 'minor Seventh')
    compare(classify_seventh(Diminished, 10)[0], 'Half-Diminished')
    compare(classify_seventh(Diminished, 9)[0], 'Diminished Seventh')
    compare(classify_seventh(Minor, 11), None)
    compare(classify_seventh(None, 10), None)

def test_ionian_triads():
    chords = diatonic_chords(Ionian, 'C')
    compare(len(chords), 7)
    compare(chords[0].notes, NoteList('CEG'))
    compare(chords[0].quality, 'Major')
    compare(chords[0].numeral, 'I')
    compare(chords[1].notes, NoteList('DFA'))
    compare(chords[1].quality, 'minor')
    compare(chords[1].numeral, 'ii')
    compare(chords[6].notes, NoteList('BDF'))
    compare(chords[6].quality, 'diminished')
    compare(chords[6].numeral, 'vii°')
    compare(chords.names, ['C', 'Dm', 'Em', 'F', 'G', 'Am', 'Bdim'])
    compare(chords.numerals, ['I', 'ii', 'iii', 'IV', 'V', 'vi', 'vii°'])
    compare(chords.complete, True)
    compare(chords[4].intervals, [0, 4, 7])
    compare(chords[6].intervals, [0, 3, 6])
    compare([c.degree for c in chords], [1, 2, 3, 4, 5, 6, 7])

def test_ionian_sevenths():
    chords = diatonic_chords(Ionian, 'C', 'seventh')
    compare(chords[4].notes, NoteList('GBDF'))
    compare(chords[4].quality, 'Dominant Seventh')
    compare(chords[4].name, 'G7')
    compare(chords[4].numeral, 'V7')
    compare(chords.names, ['Cmaj7', 'Dm7', 'Em7', 'Fmaj7', 'G7', 'Am7', 'Bm7b5'])
    compare(chords.numerals, ['Imaj7', 'ii7', 'iii7', 'IVmaj7', 'V7', 'vi7', 'viiø7'])
    compare(chords[6].quality, 'Half-Diminished')
    compare(chords[0].intervals, [0, 4, 7, 11])

def test_spelled_chords():
    # chord notes keep the spelling of the scale they come from:
    chords = diatonic_chords('major', 'B')
    compare(chords[0].notes.names, ['B', 'D#', 'F#'])
    compare(chords[4].name, 'F#')
    chords = diatonic_chords('major', 'Db', 'seventh')
    compare(chords[6].name, 'Cm7b5')
    compare(chords[6].notes.names, ['C', 'Eb', 'Gb', 'Bb'])

def test_harmonic_minor():
    triads = diatonic_chords(HarmonicMinor, 'A')
    compare(triads.names, ['Am', 'Bdim', 'Caug', 'Dm', 'E', 'F', 'G#dim'])
    compare(triads.numerals, ['i', 'ii°', 'III+', 'iv', 'V', 'VI', 'vii°'])
    compare(triads[2].quality, 'augmented')

    sevenths = diatonic_chords(HarmonicMinor, 'C', 'seventh')
    # minor triad with a major seventh is not a classified seventh chord:
    compare(sevenths[0].notes.names, ['C', 'Eb', 'G', 'B'])
    compare(sevenths[0].quality, 'Seventh Chord')
    compare(sevenths[0].name, 'C?')
    compare(sevenths[0].numeral, 'i?')
    compare(sevenths[0].classified, False)
    compare(sevenths[0].is_unknown, False)
    compare(sevenths[4].name, 'G7')
    compare(sevenths[4].numeral, 'V7')
    compare(sevenths[6].name, 'Bdim7')
    compare(sevenths[6].numeral, 'vii°7')
    compare(sevenths[6].quality, 'Diminished Seventh')

def test_unclassified_triad():
    # a root, major second and fifth match no triad quality:
    chord = Chord.from_notes(['C', 'D', 'G'], 1)
    compare(chord.quality, 'Unclassified')
    compare(chord.name, 'C?')
    compare(chord.numeral, 'I?')
    compare(chord.classified, False)
    with pytest.raises(ValueError):
        Chord.from_notes(['C', 'E'], 1)

def test_unknown_chords():
    # the fourth degree of B# lydian cannot be spelled:
    triads = diatonic_chords(Lydian, 'B#')
    compare(len(triads), 7)
    compare(triads.complete, False)
    # so every triad that contains degree 4 is unknown: those on degrees 2, 4 and 7
    unknown_degrees = [c.degree for c in triads if c.is_unknown]
    compare(unknown_degrees, [2, 4, 7])
    for c in triads:
        if c.is_unknown:
            compare(c.name, '?')
            compare(c.numeral, '?')
            compare(c.quality, 'Unknown')
            compare(len(c.notes), 0)
            compare(c.root, None)
    compare(triads[0].name, 'B#')

    sevenths = diatonic_chords(Lydian, 'B#', 'seventh')
    compare([c.degree for c in sevenths if c.is_unknown], [2, 4, 5, 7])

def test_all_catalog_chords():
    for mode in all_modes():
        for tonic in common_tonics:
            for chord_type, size in [('triad', 3), ('seventh', 4)]:
                chords = diatonic_chords(mode, tonic, chord_type)
                compare(len(chords), 7)
                compare(all([len(c) == size for c in chords]), True)
                compare(chords[0].root, tonic)
    # the seven modes of the major scale have only classified chords:
    for mode in all_modes()[:7]:
        compare(all([c.classified for c in diatonic_chords(mode, 'E', 'seventh')]), True)

def test_chord_type_errors():
    with pytest.raises(ValueError):
        diatonic_chords(Ionian, 'C', 'ninth')
    with pytest.raises(KeyError):
        diatonic_chords('bebop', 'C')

def unit_test():
    test_classification()
    test_ionian_triads()
    test_ionian_sevenths()
    test_spelled_chords()
    test_harmonic_minor()
    test_unclassified_triad()
    test_unknown_chords()
    test_all_catalog_chords()
    test_chord_type_errors()
