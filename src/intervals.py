from .qualities import Quality, value_qualities
from .parsing import degree_names, num_suffixes
from .util import log
from . import _settings

# semitone values of the major/perfect interval on each diatonic number:
default_degree_intervals = {1: 0, 2: 2, 3: 4, 4: 5, 5: 7, 6: 9, 7: 11}
# numbers whose default interval is perfect rather than major:
perfect_degrees = {1, 4, 5}

def _build_interval_table():
    """builds the fixed table mapping (quality name, number) pairs to semitone offsets.
    qualities are only defined on the numbers they make sense for (no major fifths
    or perfect thirds), and only where the offset lands inside the octave [0, 11]
    (so there is no diminished unison or augmented seventh)"""
    table = {}
    for number, default_value in default_degree_intervals.items():
        if number in perfect_degrees:
            quality_offsets = {q.full_name: q.offset_wrt_perfect for q in value_qualities.values() if not (q.major or q.minor)}
        else:
            quality_offsets = {q.full_name: q.offset_wrt_major for q in value_qualities.values() if not q.perfect}
        for quality_name, offset in quality_offsets.items():
            value = default_value + offset
            if 0 <= value <= 11:
                table[(quality_name, number)] = value
    return table

interval_semitones = _build_interval_table()

def interval_offset(quality, number):
    """returns the semitone offset (between 0 and 11) of the interval
    with the given quality (as Quality object or name/alias) and diatonic number (1-7).
    raises ValueError for combinations that are not in the interval table,
    such as a diminished unison or a major fifth."""
    quality = Quality.from_cache(quality)
    if (quality.full_name, number) not in interval_semitones:
        raise ValueError(f'No interval is defined for quality={quality.full_name} and number={number}')
    return interval_semitones[(quality.full_name, number)]


class Interval:
    """a diatonic interval above some root, defined by its quality and number,
    such as a major third (M3) or a diminished fifth (d5).
    the semitone value is looked up from the fixed interval table on init,
    so an Interval object always corresponds to a defined interval."""
    def __init__(self, quality, number):
        self.quality = Quality.from_cache(quality)
        self.number = int(number)
        # raises ValueError if this is not a defined interval:
        self.value = interval_offset(self.quality, self.number)

    @staticmethod
    def from_name(name):
        """alternative init method: parses a short interval name like 'P1', 'm3' or 'A4'"""
        if isinstance(name, Interval):
            return name
        if not isinstance(name, str) or len(name) < 2 or not name[1:].isdigit():
            raise ValueError(f'Expected an interval name like "M3" or "P5", but got: {name!r}')
        return Interval(name[0], int(name[1:]))

    @property
    def name(self):
        """short name, e.g. 'M3'"""
        return f'{self.quality.short_name}{self.number}'

    @property
    def full_name(self):
        """long name, e.g. 'Major 3rd'"""
        return f'{self.quality.name} {self.number}{num_suffixes[self.number]}'

    @property
    def degree_name(self):
        return degree_names[self.number]

    @property
    def perfect_number(self):
        return self.number in perfect_degrees

    def __int__(self):
        return self.value

    def __eq__(self, other):
        """intervals are equal only if they share quality and number,
        so that an augmented 4th is not equal to a diminished 5th.
        (for enharmonic comparison, compare their .value attributes)"""
        if isinstance(other, str):
            other = Interval.from_name(other)
        if not isinstance(other, Interval):
            return NotImplemented
        return (self.quality == other.quality) and (self.number == other.number)

    def __hash__(self):
        return hash((self.quality.value, self.number))

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{self.name}:{self.value}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['Interval']


class IntervalList(list):
    """a list of Intervals, with some useful methods"""
    def __init__(self, *items):
        if len(items) == 1 and isinstance(items[0], (list, tuple)):
            items = items[0]
        super().__init__([Interval.from_name(i) for i in items])

    @property
    def values(self):
        """the semitone offset of each interval"""
        return [iv.value for iv in self]

    @property
    def names(self):
        return [iv.name for iv in self]

    @property
    def numbers(self):
        return [iv.number for iv in self]

    def steps(self, close=True):
        """the semitone distances between consecutive intervals in this list.
        if close, include the final step from the last interval back up to the octave."""
        values = self.values
        steps = [values[i+1] - values[i] for i in range(len(values)-1)]
        if close:
            steps.append(12 - values[-1])
        log(f'Steps between {self.names}: {steps}')
        return steps

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{", ".join(self.names)}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['IntervalList']


# common intervals, for convenience:
P1 = Per1 = Interval('P', 1)
m2 = Min2 = Interval('m', 2)
M2 = Maj2 = Interval('M', 2)
m3 = Min3 = Interval('m', 3)
M3 = Maj3 = Interval('M', 3)
P4 = Per4 = Interval('P', 4)
A4 = Aug4 = Interval('A', 4)
d5 = Dim5 = Interval('d', 5)
P5 = Per5 = Interval('P', 5)
m6 = Min6 = Interval('m', 6)
M6 = Maj6 = Interval('M', 6)
m7 = Min7 = Interval('m', 7)
M7 = Maj7 = Interval('M', 7)
