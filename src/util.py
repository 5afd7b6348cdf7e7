import time
import inspect

from ._settings import VERBOSE

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
def unique_sorted(iterable):
    """accepts an iterable of hashable, comparable items
    and returns them as a sorted list without duplicates"""
    return sorted(set(iterable))

def contains_any(container, items):
    """returns True if any of items is in container"""
    return any(i in container for i in items)

def replace_first(text, old, new):
    """replaces only the first occurrence of old with new in text"""
    return text.replace(old, new, 1)
