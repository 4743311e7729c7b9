#### string parsing functions
from collections import defaultdict
from .util import reverse_dict, unpack_and_reverse_dict
from . import _settings

################### accidentals

# map semitone offset values to accidental character aliases:
offset_accidentals = {-2: ['𝄫', '♭♭', 'bb'],
                -1: ['♭', 'b'],
                 0: ['', '♮', 'N'],
                 1: ['♯', '#'],
                 2: ['𝄪', '♯♯', '##']}
# map accidental aliases to offsets:
accidental_offsets = unpack_and_reverse_dict(offset_accidentals)

if _settings.PREFER_UNICODE_ACCIDENTALS:
    fl = flat = '♭'
    sh = sharp = '♯'
    dfl = dflat = '𝄫'
    dsh = dsharp = '𝄪'
else:
    fl = flat = 'b'
    sh = sharp = '#'
    dfl = dflat = 'bb'
    dsh = dsharp = '##'

# the accidental string written after a letter, for each offset:
# (naturals are written as the bare letter)
preferred_accidentals = {-2: dfl, -1: fl, 0: '', 1: sh, 2: dsh}


################### note names
natural_note_names = ['C', 'D', 'E', 'F', 'G', 'A', 'B']
natural_note_positions = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}

def parse_note_name(name):
    """splits a note name like 'Eb' or 'F##' into its natural letter
    and the semitone offset of its accidental, returned as a (letter, offset) tuple.
    raises ValueError for strings that are not note names."""
    if not isinstance(name, str):
        raise TypeError(f'expected a note name string but got: {type(name)}')
    if len(name) == 0 or name[0] not in natural_note_positions:
        raise ValueError(f'{name!r} is not a valid note name: must begin with one of {natural_note_names}')
    letter, acc = name[0], name[1:]
    if acc not in accidental_offsets:
        raise ValueError(f'{name!r} is not a valid note name: unrecognised accidental {acc!r}')
    return letter, accidental_offsets[acc]

def is_valid_note_name(name):
    try:
        parse_note_name(name)
        return True
    except (ValueError, TypeError):
        return False

def note_name_position(name):
    """the pitch class (0-11, where C is 0) that a note name refers to"""
    letter, offset = parse_note_name(name)
    return (natural_note_positions[letter] + offset) % 12

def cast_note_name(name):
    """re-writes a note name with the preferred accidental characters,
    e.g. 'E♭' becomes 'Eb' (or vice versa, depending on _settings)"""
    letter, offset = parse_note_name(name)
    return f'{letter}{preferred_accidentals[offset]}'

def begins_with_valid_note_name(name: str):
    """checks if a string contains a valid note name in its first three characters.
    returns the length of the longest note name found there, and False if there is none."""
    for length in (3, 2, 1):
        if len(name) >= length and is_valid_note_name(name[:length]):
            return length
    return False

def note_split(name, graceful_fail=False, strip=True):
    """takes a string that begins with a note name (like the name of a key, e.g. 'F# dorian')
    splits out the note name, and returns it along with the remaining substring
    as a (note_name, remainder) tuple.
    if graceful_fail, returns False on failure to parse instead of raising error.
    if strip, strips whitespace from the remainder string before returning."""
    note_idx = begins_with_valid_note_name(name)
    if note_idx is False:
        if graceful_fail:
            return False
        else:
            raise ValueError(f'No valid note name found in first 3 characters of: {name}')
    note_name, remainder = name[:note_idx], name[note_idx:]
    if strip:
        remainder = remainder.strip()
    return note_name, remainder


################### step formulas, e.g. 'W-W-H-W-W-W-H'

step_aliases = {1: ['H', 'h', 'half', 'S'],
                2: ['W', 'w', 'whole', 'T'],
                3: ['WH', 'wh', 'HW', 'A2', 'TS']} # augmented second, i.e. whole-and-half
alias_steps = unpack_and_reverse_dict(step_aliases)
preferred_steps = {1: 'H', 2: 'W', 3: 'WH'}

def parse_formula(formula, sep='-'):
    """parses a step formula string like 'W-W-H-W-W-W-H' into a list of
    semitone step sizes, like [2,2,1,2,2,2,1]"""
    steps = []
    for token in formula.split(sep):
        token = token.strip()
        if token not in alias_steps:
            raise ValueError(f'Unrecognised step {token!r} in formula {formula!r}, expected one of: {list(alias_steps.keys())}')
        steps.append(alias_steps[token])
    return steps

def steps_to_formula(steps, sep='-'):
    return sep.join([preferred_steps[s] for s in steps])


################### natural language names for numerical interval/scale degrees

num_suffixes = defaultdict(lambda: 'th', {1: 'st', 2: 'nd', 3: 'rd'})

degree_names = {1: 'unison',  2: 'second', 3: 'third',
                4: 'fourth', 5: 'fifth', 6: 'sixth', 7: 'seventh', 8: 'octave'}


################### roman numeral handling:

numerals_roman = {1: 'I', 2: 'II', 3: 'III', 4: 'IV',
                  5: 'V', 6: 'VI', 7: 'VII'}
roman_numerals = reverse_dict(numerals_roman)
