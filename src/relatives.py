### this module maps a mode on some tonic to its relatives:
### the other modes of the major scale that share exactly the same set of pitch classes,
### such as C ionian and A aeolian, or D dorian and G mixolydian.
### only the seven modes of the major scale are related in this way;
### the other modes in the catalog have no relatives, and lookups for them return None.

from collections import namedtuple

from .notes import common_tonic
from .modes import get_mode, mode_catalog, is_valid_mode_name, Ionian
from .scales import build_scale, cast_mode, cast_tonic
from .config.def_modes import diatonic_mode_offsets
from .util import log, rotate_list

RelativeKey = namedtuple('RelativeKey', ['mode', 'tonic'])

# the conventional relative of each diatonic mode:
# the relative minor of Ionian, and the parent major of everything else.
conventional_relatives = {name: ('Aeolian' if name == 'Ionian' else 'Ionian') for name in diatonic_mode_offsets}


def _spell_from_scale(mode, tonic, position):
    """a relative mode's tonic is one of the source scale's degrees,
    so we spell it as it appears there, or fall back on the common tonic for its pitch class"""
    for note in build_scale(mode, tonic):
        if note is not None and note.position == position:
            return note
    log(f'Pitch class {position} is not spelled in {tonic.name} {mode.name}, using common tonic spelling')
    return common_tonic(position)

def parent_tonic(mode, tonic):
    """returns the tonic of the Ionian mode (i.e. the major scale) that this mode is a rotation of,
    e.g. parent_tonic('Dorian', 'D') is C.
    returns None for modes outside the seven modes of the major scale."""
    mode, tonic = cast_mode(mode), cast_tonic(tonic)
    if mode.name not in diatonic_mode_offsets:
        return None
    position = (tonic.position - diatonic_mode_offsets[mode.name]) % 12
    return _spell_from_scale(mode, tonic, position)

def relative_of(mode, tonic, target, common=False):
    """returns the RelativeKey(mode, tonic) of the 'target' mode that shares the pitch classes
    of 'mode' built on 'tonic', e.g. relative_of('Aeolian', 'A', 'Ionian') is (Ionian, C).

    by default the relative tonic is spelled as it appears in the source scale, so it may
    fall outside notes.common_tonics: the relative of E ionian in aeolian is C#, not Db.
    if common, the relative tonic is instead the common tonic for its pitch class.

    returns None if either mode is not one of the seven modes of the major scale,
    or if 'target' is not a known mode name at all."""
    mode, tonic = cast_mode(mode), cast_tonic(tonic)
    if isinstance(target, str) and not is_valid_mode_name(target):
        log(f'No relative for unknown target mode: {target}')
        return None
    target = get_mode(target)

    if mode.name not in diatonic_mode_offsets or target.name not in diatonic_mode_offsets:
        log(f'No relative defined between {mode.name} and {target.name}')
        return None

    parent_position = (tonic.position - diatonic_mode_offsets[mode.name]) % 12
    target_position = (parent_position + diatonic_mode_offsets[target.name]) % 12
    if common:
        return RelativeKey(target, common_tonic(target_position))
    return RelativeKey(target, _spell_from_scale(mode, tonic, target_position))

def relative_key(mode, tonic, common=False):
    """the conventional relative: Ionian's relative minor (Aeolian),
    or the relative major (Ionian) of any other mode of the major scale.
    returns None for modes outside the seven."""
    mode = cast_mode(mode)
    if mode.name not in conventional_relatives:
        return None
    return relative_of(mode, tonic, conventional_relatives[mode.name], common)

def relatives(mode, tonic, common=False):
    """every mode of the major scale that shares this mode's pitch classes (including itself),
    as a list of RelativeKeys in catalog order. empty for modes outside the seven."""
    mode = cast_mode(mode)
    if mode.name not in diatonic_mode_offsets:
        return []
    return [relative_of(mode, tonic, name, common) for name in diatonic_mode_offsets]


# each diatonic mode must be the rotation of Ionian that begins on the degree at its offset:
for _name, _offset in diatonic_mode_offsets.items():
    assert _offset in Ionian.offsets, f'{_name} offset {_offset} is not a degree of the Ionian mode'
    _rotated_steps = rotate_list(Ionian.steps, Ionian.offsets.index(_offset))
    assert mode_catalog[_name].steps == _rotated_steps, f'{_name} steps {mode_catalog[_name].steps} are not the rotation of Ionian at offset {_offset}: {_rotated_steps}'
