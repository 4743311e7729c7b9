import time
import inspect

VERBOSE = False

global_init_time = time.time()

class Log:
    """logging class for detailed info from nested function execution"""
    def __init__(self, verbose=VERBOSE):
        self.verbose=verbose

    def __call__(self, msg):
        if self.verbose:
            cur_frame = inspect.currentframe()
            call_frame = inspect.getouterframes(cur_frame, 2)
            wall_time = time.time() - global_init_time

            context = f'[{wall_time:.06f}]({call_frame[1][3]}) '
            print(context + msg)

log = Log()

# generically useful functions used across modules:
def rotate_list(lst, num_steps, N=None):
    """Accepts a list, and returns the wrapped-around list
    that begins num_steps up from the beginning of the original.
    used for modes, which are rotations of scales.
    N uses the length of the list by default"""
    if N is None:
        N = len(lst)
    rotated_start_place = num_steps
    rotated_idxs = [(rotated_start_place + i) % N for i in range(N)]
    rotated_lst= [lst[i] for i in rotated_idxs]
    return rotated_lst

def reverse_dict(dct):
    """accepts a dict whose values and keys are both unique,
    and returns the reversed dict where keys are values and vice versa"""
    rev_dct = {}
    for k,v in dct.items():
        if isinstance(v, list):
            v = tuple(v)
        rev_dct[v] = k
    return rev_dct

def unpack_and_reverse_dict(dct, include_keys=False, force_list=False):
    """accepts a dict whose values are iterables, the items of which are all unique,
    and returns the reversed dict that maps each item to its corresponding parent key"""
    rev_dct = {}
    for k, v_list in dct.items():
        if not isinstance(v_list, (tuple, list)):
            # we expected the value to be an iterable, but it isn't one
            if force_list:
                # set it to be one anyway:
                v_list = [v_list]
            else:
                raise TypeError(f"unpack_and_reverse_dict expects dict values to be tuples or lists of strings")

        for v_item in v_list:
            rev_dct[v_item] = k
        if include_keys:
            # map original dict key back into itself, e.g. for aliases
            rev_dct[k] = k
    return rev_dct

def check_all(iterable, check, comparison):
    """accepts an iterable of objects, and a type that they are assumed to be,
    and individually checks that all items in iterable are of that type.
    also allows direct (not type) comparison through the == argument.

    'check' arg determines what function we use to check against comparison. must be one of:
        'isinstance' / 'instance': use "isinstance(X, Y)""
        'is':                      use "X is Y"
        '==' / 'eq' / 'equals':    use "X == Y"
        'isin' / 'is_in', 'in':    use "X in Y"  """
    for item in iterable:
        if check in ('isinstance', 'instance'):
            if not (isinstance(item, comparison)):
                return False
        elif check == 'is':
            if not (item is comparison):
                return False
        elif check in ('==', 'eq', 'equals'):
            if not (item == comparison):
                return False
        elif check in ('isin', 'is_in', 'in'):
            if not (item in comparison):
                return False
        else:
            raise ValueError(f"invalid check arg ({check}) to check_all, must be one of: 'isinstance', '==', 'is', 'is_in'")
    return True

class ModDict(dict):
    def __init__(self, *args, index=0, max_key=None, **kwargs):
        """a special dict class with integer keys (such as scale degrees)
        that modulos during its lookup if a provided index exceeds its defined maximum key.
        arg 'index' determines the integer associated with the first key.
            i.e. if keys are semitones index should be 0; if they are degrees, it should be 1.
        arg 'max_key' determines the highest allowable key before modulo;
            if None, it is auto-determined and dynamically updated with dict updates."""
        super().__init__(*args, **kwargs)

        if max_key is None:
            self.dynamic_max = True # will be updated along with this dict
            self.max_key = max(list(self.keys()))
        else:
            self.dynamic_max = False # will not be updated
            self.max_key = max_key

        self.index = index

    def __getitem__(self, i):
        # we only modulo keys ABOVE max key, not below index
        if i > self.max_key:
            m = ((i - self.index) % (self.max_key - self.index + 1)) + self.index
        else:
            m = i
        return super().__getitem__(m)

    def __setitem__(self, x, y):
        """as dict.__setitem__, but also updates self.max_key
        if dynamic maxing is on"""
        super().__setitem__(x, y)
        if self.dynamic_max:
            self.max_key = max(list(self.keys()))
