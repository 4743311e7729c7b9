from ..qualities import *
from .testing_tools import compare
import pytest

def unit_test():
    # aliases:
    compare(Quality('M'), Major)
    compare(Quality('m'), Minor)
    compare(Quality('P'), Perfect)
    compare(Quality('aug'), Augmented)
    compare(Quality('°'), Diminished)
    compare(Quality.from_cache('Dim'), Diminished)
    compare(Quality(value=-1), Minor)

    # inversion:
    compare(~Major, Minor)
    compare(~Augmented, Diminished)
    compare(~Perfect, Perfect)

    # names:
    compare(Major.name, 'Major')
    compare(Minor.name, 'minor')
    compare(Diminished.short_name, 'd')
    compare(Augmented.short_name, 'A')

    # offsets:
    compare(Minor.offset_wrt_major, -1)
    compare(Diminished.offset_wrt_major, -2)
    compare(Augmented.offset_wrt_perfect, 1)

def test_qualities():
    unit_test()

def test_quality_errors():
    with pytest.raises(ValueError):
        Quality('middling')
    with pytest.raises(ValueError):
        Quality(value=5)
    with pytest.raises(ValueError):
        Perfect.offset_wrt_major
    with pytest.raises(ValueError):
        Major.offset_wrt_perfect
