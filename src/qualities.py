# OOP representation of interval quality: major/minor-ness as well as perfect/augmented/diminished
from .util import reverse_dict, unpack_and_reverse_dict
from . import _settings


#### interval qualities:

quality_aliases = {'major': ['maj', 'M'],
           'minor': ['min', 'm'],
           'perfect': ['perf', 'per', 'P'],
           'augmented': ['aug', 'A', '+'],
           'diminished': ['dim', 'd', '°', 'o']}
alias_qualities = unpack_and_reverse_dict(quality_aliases, include_keys=True)

quality_values = {   'diminished': -2,
                     'minor': -1,
                     'perfect': 0,
                     'major': 1,
                     'augmented': 2}
value_names = reverse_dict(quality_values)


class Quality:
    """class representing interval quality: major/minor-ness
    as well as perfect/augmented/diminished qualities
    with inversion method defined for the major-minor and aug-dim relationship"""
    def __init__(self, name=None, value=None):
        if name is not None:
            assert value is None, "Quality init must provide one of 'name' OR 'value', but got both"
            self.full_name, self.value = self._parse_input(name)
        elif value is not None:
            assert name is None, "Quality init must provide one of 'name' OR 'value', but got both"
            if value not in value_names:
                raise ValueError(f'Quality value must be between -2 and 2, but got: {value}')
            self.value = value
            self.full_name = value_names[value]
        else:
            raise ValueError("Quality init must provide one of 'name' or 'value', but got neither")

        self.major = self.value == 1
        self.minor = self.value == -1
        self.perfect = self.value == 0
        self.augmented = self.value == 2
        self.diminished = self.value == -2

    def _parse_input(self, inp):
        """accepts either a string denoting quality name, or an existing quality.
        sanitises input and returns the corresponding canonical name and quality value"""

        if isinstance(inp, Quality):
            # accept re-casting:
            return inp.full_name, inp.value
        elif isinstance(inp, str):
            # case-insensitive except for the crucial distinction between m and M:
            name = inp.lower() if len(inp) > 1 else inp

            if name in alias_qualities.keys():
                # cast to canonical string name (major/minor/perfect etc.) from possible aliases:
                canonical_name = alias_qualities[name]
                value = quality_values[canonical_name]
                return canonical_name, value
            else:
                raise ValueError(f'Quality object init received unknown quality name: {inp}')
        else:
            raise TypeError(f'Quality object initialised using name arg, expected string (or Quality object) but got type: {type(inp)}')

    @staticmethod
    def from_cache(name=None, value=None):
        """efficient Quality object retrieval without init"""
        if value is not None:
            return value_qualities[value]
        elif name is not None:
            if isinstance(name, Quality):
                return name
            name = name.lower() if len(name) > 1 else name
            if name not in alias_qualities:
                raise ValueError(f'Unknown quality name: {name}')
            return value_qualities[quality_values[alias_qualities[name]]]

    def __invert__(self):
        """invert major to minor, aug to dim, or vice versa"""
        return value_qualities[self.value * -1]

    def __eq__(self, other):
        """qualities are equal to other qualities with the same name/value"""
        if isinstance(other, str):
            other = Quality.from_cache(other)
        if not isinstance(other, Quality):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(str(self))

    # interval offsets with respect to major or perfect qualities:
    @property
    def offset_wrt_major(self):
        """offsets relative to a major interval are 0 for major, -1 for minor, +1 for augmented etc."""
        if self.perfect:
            raise ValueError(f"{self.full_name} quality should not have its offset compared to a major interval")
        return offsets_wrt_major[self.full_name]

    @property
    def offset_wrt_perfect(self):
        """offsets relative to a perfect interval are -1 if diminished and +1 if augmented"""
        if self.major or self.minor:
            raise ValueError(f"{self.full_name} quality should not have its offset compared to a perfect interval")
        return offsets_wrt_perfect[self.full_name]

    @property
    def name(self):
        """the conventional capitalised name, e.g. 'Major', 'minor', 'Perfect'"""
        if self.minor or self.diminished:
            return self.full_name
        return self.full_name.capitalize()

    @property
    def short_name(self):
        """single-character name as used in interval names like 'M3' or 'd5'"""
        if self.minor or self.diminished:
            return self.full_name[0]
        return self.full_name[0].upper()

    def __str__(self):
        lb, rb = self._brackets
        return f'{lb}{self.full_name}{rb}'

    def __repr__(self):
        return str(self)

    _brackets = _settings.BRACKETS['Quality']


# interval semitone distances from major or perfect interval degrees:

offsets_wrt_major = {'diminished': -2,
                     'minor': -1,
                     'major': 0,
                     'augmented': 1}

offsets_wrt_perfect = {'diminished': -1,
                       'perfect': 0,
                       'augmented': 1}

# pre-initialised quality objects:
value_qualities = {v: Quality(value=v) for v in value_names.keys()}

Major = Maj = value_qualities[1]
Minor = Min = value_qualities[-1]
Perfect = Per = value_qualities[0]
Augmented = Aug = value_qualities[2]
Diminished = Dim = value_qualities[-2]
