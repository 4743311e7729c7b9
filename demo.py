### this demo script just imports the entire modalis namespace for easy access.
### it's intended to be used interactively without the need to install the package properly, e.g.
### e.g.:  $ python -i demo.py

import time

# time how long init takes for debugging purposes:
init_start_time = time.time()

from src import util, parsing, tuning, _settings
from src.qualities import *
from src.intervals import *
from src.notes import *
from src.modes import *
from src.scales import *
from src.chords import *
from src.relatives import *
from src.keys import *

init_end_time = time.time()
init_time = init_end_time - init_start_time
print(f'modalis library initialised in {init_time:.2} seconds')

if __name__ == '__main__':
    for mode in all_modes():
        key = Key(mode, 'D')
        print(repr(key))
        print(f'  triads:   {key.chords()}')
        print(f'  sevenths: {key.chords("seventh")}')
        if key.relative_key is not None:
            print(f'  relative: {key.relative_key}')
