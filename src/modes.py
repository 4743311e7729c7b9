### this module contains the Mode class and the mode catalog built from config.def_modes.
### a Mode is an abstract heptatonic scale: seven intervals above a tonic,
### with no particular tonic attached (for that, see keys.Key).

from .intervals import IntervalList
from .parsing import parse_formula, steps_to_formula
from .util import log, unpack_and_reverse_dict
from .config.def_modes import mode_defines, mode_aliases, mode_groups as mode_group_names, diatonic_mode_offsets
from . import _settings


class Mode:
    """a named pattern of seven intervals over an octave, such as Dorian or Harmonic Minor.
    Modes are validated on init: the interval list and the step formula must describe
    the same scale, or else a ValueError is raised."""
    def __init__(self, name, formula, intervals, category,
                 derivation=None, characteristic_intervals=None,
                 description='', characteristic=''):
        self.name = name
        self.intervals = IntervalList(intervals) # raises ValueError on any undefined interval
        self.formula = formula
        self.category = category
        self.description = description
        self.characteristic = characteristic

        # derivation is a (parent mode name, parent display name) pair, or None:
        if derivation is not None:
            self.derivation_parent, self.derivation_name = derivation
        else:
            self.derivation_parent, self.derivation_name = None, None
        self.characteristic_intervals = list(characteristic_intervals) if characteristic_intervals is not None else []

        self.steps = self._validate()

    def _validate(self):
        """checks that this mode's intervals and formula agree,
        and returns the full cycle of (7) semitone steps"""
        if len(self.intervals) != 7:
            raise ValueError(f'{self.name} mode must have exactly 7 intervals, but got {len(self.intervals)}: {self.intervals}')
        if self.intervals.numbers != list(range(1,8)):
            raise ValueError(f'{self.name} mode intervals must be numbered 1 to 7 in order, but got: {self.intervals.numbers}')
        if self.intervals[0].value != 0:
            raise ValueError(f'{self.name} mode must begin on a perfect unison, but begins on: {self.intervals[0].name}')

        steps = parse_formula(self.formula)
        if len(steps) == 6:
            # formula gives only the inter-degree steps, so the closing step to the octave is implied:
            steps.append(12 - sum(steps))
        elif len(steps) != 7:
            raise ValueError(f'{self.name} mode formula must have 6 or 7 steps, but got {len(steps)}: {self.formula}')
        if sum(steps) != 12:
            raise ValueError(f'{self.name} mode formula must span exactly one octave, but spans {sum(steps)} semitones')

        # the steps, summed cumulatively from the tonic, must land on each interval in turn:
        expected_steps = self.intervals.steps(close=True)
        if steps != expected_steps:
            raise ValueError(f'{self.name} mode formula {self.formula} (steps: {steps}) disagrees with its intervals '
                             f'{self.intervals.names} (which imply steps: {expected_steps})')

        for num in self.characteristic_intervals:
            if num not in range(1,8):
                raise ValueError(f'{self.name} mode has characteristic interval {num}, which is not a degree between 1 and 7')
        return steps

    @property
    def offsets(self):
        """the semitone offset of each degree above the tonic"""
        return self.intervals.values

    @property
    def is_diatonic(self):
        """True for the seven modes of the major scale"""
        return self.name in diatonic_mode_offsets

    @property
    def parent(self):
        """the Mode this one is conventionally derived from, or None"""
        if self.derivation_parent is None:
            return None
        return mode_catalog[self.derivation_parent]

    def is_characteristic(self, number):
        return number in self.characteristic_intervals

    def alterations_from(self, other=None):
        """compares this mode's intervals to those of another mode, degree by degree
        (by default, to this mode's derivation parent),
        and returns a dict mapping each altered degree number to 'raised' or 'lowered'."""
        if other is None:
            other = self.parent
            if other is None:
                return {}
        elif isinstance(other, str):
            other = get_mode(other)

        alterations = {}
        for iv, other_iv in zip(self.intervals, other.intervals):
            if iv.value > other_iv.value:
                alterations[iv.number] = 'raised'
            elif iv.value < other_iv.value:
                alterations[iv.number] = 'lowered'
        return alterations

    def step_changes_from(self, other):
        """compares this mode's step formula to that of another mode, step by step,
        and returns a dict mapping the index of each changed step (0 for the step
        from the first degree to the second) to 'increased' or 'decreased'."""
        other = get_mode(other)
        changes = {}
        for i, (step, other_step) in enumerate(zip(self.steps, other.steps)):
            if step > other_step:
                changes[i] = 'increased'
            elif step < other_step:
                changes[i] = 'decreased'
        return changes

    @property
    def tense_steps(self):
        """indices of the augmented-second (whole-and-half) steps in this mode's formula"""
        return [i for i, step in enumerate(self.steps) if step == 3]

    def __len__(self):
        return len(self.intervals)

    def __eq__(self, other):
        if not isinstance(other, Mode):
            return NotImplemented
        return (self.name == other.name) and (self.intervals == other.intervals)

    def __hash__(self):
        return hash(f'Mode:{self.name}')

    def __str__(self):
        return f'{self._marker}{self.name} ({steps_to_formula(self.steps)})'

    def __repr__(self):
        return str(self)

    _marker = _settings.MARKERS['Mode']


#### the mode catalog, built and validated once on import:
def _build_catalog(defines):
    catalog = {}
    for name, definition in defines.items():
        catalog[name] = Mode(name, **definition)
        log(f'Registered mode: {catalog[name]}')
    # derivation parents must themselves be in the catalog:
    for name, mode in catalog.items():
        if mode.derivation_parent is not None and mode.derivation_parent not in catalog:
            raise ValueError(f'{name} mode is derived from {mode.derivation_parent}, which is not a known mode')
    return catalog

def _build_groups(catalog, group_names):
    """maps each group's leading Mode to the list of its variant Modes"""
    for group_name, variants in group_names.items():
        for name in [group_name] + variants:
            if name not in catalog:
                raise ValueError(f'Mode group {group_name} refers to unknown mode: {name}')
    return {catalog[group]: [catalog[v] for v in variants] for group, variants in group_names.items()}

mode_catalog = _build_catalog(mode_defines)

# lowercase lookup names, including aliases:
mode_lookup = {name.lower(): name for name in mode_catalog}
mode_lookup.update({alias: name for alias, name in unpack_and_reverse_dict(mode_aliases).items()})

mode_groups = _build_groups(mode_catalog, mode_group_names)


def all_modes():
    """every Mode in the catalog, in stable catalog order"""
    return list(mode_catalog.values())

def get_mode(name):
    """looks up a Mode by name or alias (case-insensitive), e.g. 'dorian' or 'natural minor'.
    accepts Mode objects too, and returns them unchanged.
    raises KeyError for unknown names."""
    if isinstance(name, Mode):
        return name
    if not isinstance(name, str):
        raise TypeError(f'Mode lookup expects a mode name string, but got: {type(name)}')
    key = ' '.join(name.lower().split())
    if key not in mode_lookup:
        raise KeyError(f'{name!r} is not a known mode name, expected one of: {list(mode_catalog.keys())}')
    return mode_catalog[mode_lookup[key]]

def is_valid_mode_name(name):
    return isinstance(name, str) and ' '.join(name.lower().split()) in mode_lookup


# the catalog entries, for convenience:
Ionian = mode_catalog['Ionian']
Dorian = mode_catalog['Dorian']
Phrygian = mode_catalog['Phrygian']
Lydian = mode_catalog['Lydian']
Mixolydian = mode_catalog['Mixolydian']
Aeolian = mode_catalog['Aeolian']
Locrian = mode_catalog['Locrian']
HarmonicMinor = mode_catalog['Harmonic Minor']
MelodicMinor = mode_catalog['Melodic Minor']
AcousticScale = mode_catalog['Acoustic Scale']
