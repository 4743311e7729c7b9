############# preference settings:

### PREFER_UNICODE_ACCIDENTALS controls whether the default behaviour
### when printing sharp and flat signs are the normal keyboard-typable
### characters '#' and 'b' (if False)
### or the unicode characters '♯' and '♭' (if True)
PREFER_UNICODE_ACCIDENTALS = False
### both are treated as valid input options in either case,
### this only affects what the program outputs to screen

### COMMON_TONIC_NAMES are the spellings used for the twelve supported tonics,
### indexed by pitch class. these are also the spellings used when a Note is
### initialised by position alone, e.g. Note(position=3) is Eb.
### every mode in the catalog must spell all seven of its degrees on each of these.
COMMON_TONIC_NAMES = ['C', 'Db', 'D', 'Eb', 'E', 'F', 'F#', 'G', 'Ab', 'A', 'Bb', 'B']


# modalis objects use little unicode MARKERS in their string methods
# to identify them at a glance. the default markers are defined here, so you
# can change them if you don't like them:
MARKERS = { # class markers used to identify musical object types:
            'Note': '♩',
    'AbsoluteNote': '♪',
           'Chord': '♬ ',
            'Mode': '𝄢 ',
             'Key': '𝄞 ',
            }

### BRACKETS are used similarly to markers, but placed around the objects they contain:
BRACKETS = { 'Interval': ['‹', '›'],
         'IntervalList': ['𝄁', ' 𝄁'],
             'NoteList': ['𝄃', ' 𝄂'],
              'Quality': ['~', '~'],
            'ChordList': ['𝄃 ', ' 𝄂'],
            }

### CHARACTERS are used in chord names and numerals to compactly denote certain traits
CHARACTERS = { 'unknown_chord': '?',    # displayed after root for a chord of unclassified type, e.g. C? chord
                                        # and on its own for a chord whose notes could not be spelled
                  'diminished': '°',    # appended to numerals of diminished chords, e.g. vii°
             'half_diminished': 'ø',    # e.g. viiø7
                   'augmented': '+',    # e.g. III+
             }


############# tuning settings:

### C4_PITCH is the reference frequency (in Hz) of middle C, semitone 0.
### all other pitches are derived from it by twelve-tone equal temperament,
### so that semitone 9 (A4) lands close to 440 Hz.
C4_PITCH = 261.63
