import cProfile, pstats

PROFILE_INIT = True
if PROFILE_INIT:
    profiler = cProfile.Profile()
    profiler.enable()
from src.matching import matching_chords
from src.display import chord_table

# individual test modules:
from src.test import test_util, test_parsing, test_notes, test_intervals, test_spelling
from src.test import test_tensions, test_chords, test_matching, test_display

from src import util
if PROFILE_INIT:

    profiler.disable()
    stats = pstats.Stats(profiler).sort_stats('cumtime')
    stats.print_stats(20)

util.log.verbose = False

PROFILE_EACH = False

modules_to_test = [
                  test_util,
                  test_parsing,
                  test_notes,
                  test_intervals,
                  test_spelling,
                  test_tensions,
                  test_chords,
                  test_matching,
                  test_display,
                  ]

def module_tests(module):
    """every test function defined in a test module, in definition order.
    tests that take pytest fixtures (like capsys) are left to pytest."""
    tests = []
    for name, obj in vars(module).items():
        if name.startswith('test_') and callable(obj) and obj.__code__.co_argcount == 0:
            tests.append(obj)
    return tests

def run_all_tests():
    for module in modules_to_test:

        @profile
        def module_test():
            print(f'Testing {module.__name__}')
            for test in module_tests(module):
                test()
            print(f' + {module.__name__} test passed + ')

        module_test()
    print(f'+++ All tests passed +++')

def profile(func):
    def wrapper():
        if PROFILE_EACH:
            profiler = cProfile.Profile()
            profiler.enable()
            func()
            profiler.disable()
            stats = pstats.Stats(profiler).sort_stats('cumtime')
            stats.print_stats(6)
        else:
            func()
    return wrapper

if PROFILE_EACH:
    run_all_tests()
else:
    # profile them all together:
    profiler = cProfile.Profile()
    profiler.enable()

    run_all_tests()

    profiler.disable()
    stats = pstats.Stats(profiler).sort_stats('tottime')
    print('='*20 + '\nPROFILING:\n' + '='*20)
    stats.print_stats(20)

    # and a quick look at the matcher at work:
    chord_table([[60, 64, 67], [64, 67, 71, 72], [60, 64, 67, 70, 75], [48, 52, 55, 58, 61, 68]])
    matching_chords('C4 E4 G4 Bb4 D#5', max_results=5)
