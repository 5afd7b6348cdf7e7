from ..intervals import (normalize_intervals, calculate_actual_intervals,
                         get_actual_interval_for_pitch_class, INTERVAL_NAMES, ActualInterval)
from .testing_tools import compare

def test_normalize_intervals():
    compare(normalize_intervals([0, 12, 24]), (0,))
    compare(normalize_intervals([0, 4, 7, 16]), (0, 4, 7))
    compare(normalize_intervals([7, 0, 4]), (0, 4, 7))
    compare(normalize_intervals([11, 3, 7, 0]), (0, 3, 7, 11))
    compare(normalize_intervals([0, 4, 4, 7]), (0, 4, 7))
    compare(normalize_intervals([-1]), (11,))
    compare(normalize_intervals([-5]), (7,))
    # compound intervals (9th, 11th, 13th):
    compare(normalize_intervals([0, 4, 7, 14]), (0, 2, 4, 7))
    compare(normalize_intervals([0, 4, 7, 17]), (0, 4, 5, 7))
    compare(normalize_intervals([0, 4, 7, 21]), (0, 4, 7, 9))

def test_interval_names():
    compare(len(INTERVAL_NAMES), 12)
    compare(INTERVAL_NAMES[0], 'Root')
    compare(INTERVAL_NAMES[6], 'Tritone')
    compare(INTERVAL_NAMES[11], 'Maj 7th')

def test_actual_intervals():
    # root is sounded: measure from its lowest instance
    actual = calculate_actual_intervals([48, 52, 55, 58, 63], 0)
    compare([a.actual_interval for a in actual], [0, 4, 7, 10, 15])
    compare(actual[-1], ActualInterval(pitch_class=3, actual_interval=15, midi=63))

    # root sounded above the bass: notes below it have negative intervals
    compare([a.actual_interval for a in calculate_actual_intervals([52, 55, 60], 0)], [-8, -5, 0])

    # root is not sounded: measure from the nearest virtual root below the bass
    compare([a.actual_interval for a in calculate_actual_intervals([52, 58, 62], 0)], [4, 10, 14])
    compare(calculate_actual_intervals([], 0), [])

def test_actual_interval_for_pitch_class():
    actual = calculate_actual_intervals([48, 51, 52, 63], 0)
    # pc 3 is sounded at 3 and 15 semitones: the compound instance wins
    compare(get_actual_interval_for_pitch_class(actual, 3, 0), 15)
    compare(get_actual_interval_for_pitch_class(actual, 4, 0), 4)
    # not sounded: simple interval above the root
    compare(get_actual_interval_for_pitch_class(actual, 7, 0), 7)
    compare(get_actual_interval_for_pitch_class([], 0, 7), 5)
