from ..util import rotate_list, reverse_dict, unpack_and_reverse_dict, check_all, ModDict, Log
from .testing_tools import compare
import pytest

def test_rotate_list():
    steps = [2, 2, 1, 2, 2, 2, 1]
    compare(rotate_list(steps, 0), steps)
    compare(rotate_list(steps, 1), [2, 1, 2, 2, 2, 1, 2])
    compare(rotate_list(steps, 6), [1, 2, 2, 1, 2, 2, 2])
    compare(rotate_list(steps, 7), steps)

def test_dict_reversal():
    compare(reverse_dict({1: 'a', 2: 'b'}), {'a': 1, 'b': 2})
    aliases = {'Ionian': ['major', 'natural major'], 'Aeolian': ['minor']}
    compare(unpack_and_reverse_dict(aliases), {'major': 'Ionian', 'natural major': 'Ionian', 'minor': 'Aeolian'})
    compare(unpack_and_reverse_dict(aliases, include_keys=True)['Aeolian'], 'Aeolian')
    with pytest.raises(TypeError):
        unpack_and_reverse_dict({'a': 1})

def test_check_all():
    compare(check_all([1, 2, 3], 'isinstance', int), True)
    compare(check_all([1, None, 3], 'isinstance', int), False)
    compare(check_all([1, 2], 'in', [1, 2, 3]), True)
    with pytest.raises(ValueError):
        check_all([1], 'roughly', 1)

def test_moddict():
    # scale degrees, indexed from 1:
    degrees = ModDict({d: d*10 for d in range(1, 8)}, index=1)
    compare(degrees[1], 10)
    compare(degrees[7], 70)
    compare(degrees[8], 10)
    compare(degrees[11], 40)
    compare(degrees[13], 60)
    # semitones, indexed from 0:
    semitones = ModDict({s: s for s in range(12)}, index=0)
    compare(semitones[12], 0)
    compare(semitones[19], 7)

def test_log(capsys):
    quiet_log = Log(verbose=False)
    quiet_log('nothing to see')
    compare(capsys.readouterr().out, '')
    loud_log = Log(verbose=True)
    loud_log('something to see')
    compare('something to see' in capsys.readouterr().out, True)

def unit_test():
    test_rotate_list()
    test_dict_reversal()
    test_check_all()
    test_moddict()
