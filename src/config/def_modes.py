### the modes known to modalis are defined here, in catalog order.
### this order is stable and is the order in which modes are presented for selection.
###
### each mode is given by its intervals above the tonic (as short interval names),
### and by its step formula, written with W (whole step), H (half step)
### and WH (whole-and-half step, i.e. an augmented second).
### the two must describe the same scale: this is checked when the catalog is built.
###
### 'derivation' names the mode that this one is conventionally described relative to,
### and 'characteristic' lists the degree numbers that set it apart from that parent.

mode_defines = {
    #### the seven modes of the major scale:
    'Ionian': dict(
        formula = 'W-W-H-W-W-W-H',
        intervals = ['P1', 'M2', 'M3', 'P4', 'P5', 'M6', 'M7'],
        category = 'Major Scale Modes',
        derivation = ('Aeolian', 'Natural Minor'),
        characteristic_intervals = [],
        description = 'The standard major scale. Bright, happy, and conclusive.',
        characteristic = 'Major 3rd, Major 7th'),

    'Dorian': dict(
        formula = 'W-H-W-W-W-H-W',
        intervals = ['P1', 'M2', 'm3', 'P4', 'P5', 'M6', 'm7'],
        category = 'Major Scale Modes',
        derivation = ('Aeolian', 'Natural Minor'),
        characteristic_intervals = [6],
        description = 'A minor scale with a major 6th. Jazzy, melancholic, yet hopeful.',
        characteristic = 'Minor 3rd, Major 6th'),

    'Phrygian': dict(
        formula = 'H-W-W-W-H-W-W',
        intervals = ['P1', 'm2', 'm3', 'P4', 'P5', 'm6', 'm7'],
        category = 'Major Scale Modes',
        derivation = ('Aeolian', 'Natural Minor'),
        characteristic_intervals = [2],
        description = 'A minor scale with a minor 2nd. Dark, Spanish, and dramatic.',
        characteristic = 'Minor 2nd'),

    'Lydian': dict(
        formula = 'W-W-W-H-W-W-H',
        intervals = ['P1', 'M2', 'M3', 'A4', 'P5', 'M6', 'M7'],
        category = 'Major Scale Modes',
        derivation = ('Ionian', 'Major Scale'),
        characteristic_intervals = [4],
        description = 'A major scale with a raised 4th. Dreamy, magical, and ethereal.',
        characteristic = 'Augmented 4th'),

    'Mixolydian': dict(
        formula = 'W-W-H-W-W-H-W',
        intervals = ['P1', 'M2', 'M3', 'P4', 'P5', 'M6', 'm7'],
        category = 'Major Scale Modes',
        derivation = ('Ionian', 'Major Scale'),
        characteristic_intervals = [7],
        description = 'A major scale with a minor 7th. Bluesy, rock-oriented, and dominant.',
        characteristic = 'Minor 7th'),

    'Aeolian': dict(
        formula = 'W-H-W-W-H-W-W',
        intervals = ['P1', 'M2', 'm3', 'P4', 'P5', 'm6', 'm7'],
        category = 'Major Scale Modes',
        derivation = ('Ionian', 'Major Scale'),
        characteristic_intervals = [],
        description = 'The natural minor scale. Sad, emotional, and serious.',
        characteristic = 'Minor 3rd, Minor 6th, Minor 7th'),

    'Locrian': dict(
        formula = 'H-W-W-H-W-W-W',
        intervals = ['P1', 'm2', 'm3', 'P4', 'd5', 'm6', 'm7'],
        category = 'Major Scale Modes',
        derivation = ('Aeolian', 'Natural Minor'),
        characteristic_intervals = [5],
        description = 'A diminished scale with a minor 2nd. Tense, unstable, and unresolved.',
        characteristic = 'Diminished 5th'),

    #### minor scales:
    'Harmonic Minor': dict(
        formula = 'W-H-W-W-H-WH-H',
        intervals = ['P1', 'M2', 'm3', 'P4', 'P5', 'm6', 'M7'],
        category = 'Minor Scales',
        derivation = ('Aeolian', 'Natural Minor'),
        characteristic_intervals = [7],
        description = 'A minor scale with a raised 7th, creating a strong pull to the tonic.',
        characteristic = 'Major 7th, Augmented 2nd'),

    'Melodic Minor': dict(
        formula = 'W-H-W-W-W-W-H',
        intervals = ['P1', 'M2', 'm3', 'P4', 'P5', 'M6', 'M7'],
        category = 'Minor Scales',
        derivation = ('Aeolian', 'Natural Minor'),
        characteristic_intervals = [6, 7],
        description = 'A minor scale with a raised 6th and 7th (ascending). Often used in jazz.',
        characteristic = 'Major 6th, Major 7th'),

    #### other scales:
    'Acoustic Scale': dict(
        formula = 'W-W-W-H-W-H-W',
        intervals = ['P1', 'M2', 'M3', 'A4', 'P5', 'M6', 'm7'],
        category = 'Other Scales',
        derivation = ('Lydian', 'Lydian'),
        characteristic_intervals = [7],
        description = 'Also known as Lydian Dominant. A bright, bluesy scale with a unique sound.',
        characteristic = 'Augmented 4th, Minor 7th'),
}

# alternative names that mode lookup accepts, in lowercase:
mode_aliases = {'Ionian': ['major', 'natural major', 'major scale'],
               'Aeolian': ['minor', 'natural minor'],
         'Melodic Minor': ['jazz minor', 'melodic minor ascending'],
        'Acoustic Scale': ['acoustic', 'lydian dominant', 'overtone'],
               }

# how the modes are grouped for selection:
# each diatonic mode, followed by the variants that are shown alongside it.
mode_groups = {'Ionian': [],
               'Dorian': [],
             'Phrygian': [],
               'Lydian': ['Acoustic Scale'],
           'Mixolydian': [],
              'Aeolian': ['Harmonic Minor', 'Melodic Minor'],
              'Locrian': [],
               }

# semitone offset of each diatonic mode's tonic above its parent Ionian tonic.
# only the seven modes of the major scale have a relative in this sense:
diatonic_mode_offsets = {'Ionian': 0,
                         'Dorian': 2,
                       'Phrygian': 4,
                         'Lydian': 5,
                     'Mixolydian': 7,
                        'Aeolian': 9,
                        'Locrian': 11,
                         }
