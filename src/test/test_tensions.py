from ..tensions import get_tension_quality, disambiguate_tensions, TensionDisambiguation
from ..intervals import calculate_actual_intervals
from .testing_tools import compare

def test_tension_quality():
    # from the pattern name alone:
    compare(get_tension_quality('7#9', 3), 'sharp')
    compare(get_tension_quality('min7', 3), 'natural')
    compare(get_tension_quality('Maj7#11', 6), 'sharp')
    compare(get_tension_quality('7b5', 6), 'flat')
    compare(get_tension_quality('dim', 6), 'natural')
    compare(get_tension_quality('aug', 8), 'sharp')
    compare(get_tension_quality('7b13', 8), 'flat')
    compare(get_tension_quality('7b9', 1), 'flat')
    compare(get_tension_quality('Maj7', 11), 'natural')

    # the actual voicing takes precedence:
    compare(get_tension_quality('', 3, 15), 'sharp')
    compare(get_tension_quality('', 3, 3), 'natural')
    compare(get_tension_quality('', 6, 18), 'sharp')
    compare(get_tension_quality('', 6, 6), 'flat')
    compare(get_tension_quality('', 8, 8), 'sharp')
    compare(get_tension_quality('', 8, 20), 'flat')
    # unless the name says otherwise:
    compare(get_tension_quality('7#9', 3, 3), 'sharp')
    compare(get_tension_quality('7b13', 8, 8), 'flat')

def test_disambiguation():
    # C7#9, with the #9 voiced above the octave:
    notes = [60, 64, 67, 70, 75]
    readings = disambiguate_tensions(calculate_actual_intervals(notes, 0), 0,
                                     has_maj3=True, has_min3=True, has_7th=True, has_perfect5=True)
    compare(readings.interval3_is_sharp9, True)
    # major 3rd and perfect 5th make any tritone a #11:
    compare(readings.interval6_is_sharp11, True)
    # a 5th is present, so interval 8 would be a b13:
    compare(readings.interval8_is_sharp5, False)

    # C Eb E G, with the minor 3rd below the major 3rd, is a cluster:
    notes = [60, 63, 64, 67]
    readings = disambiguate_tensions(calculate_actual_intervals(notes, 0), 0,
                                     has_maj3=True, has_min3=True, has_7th=False, has_perfect5=True)
    compare(readings.interval3_is_sharp9, False)

    # C E G# with no 5th or 7th: augmented
    notes = [60, 64, 68]
    readings = disambiguate_tensions(calculate_actual_intervals(notes, 0), 0,
                                     has_maj3=True, has_min3=False, has_7th=False, has_perfect5=False)
    compare(readings, TensionDisambiguation(interval8_is_sharp5=True))

    # C E Gb Bb: the tritone is a flat 5th
    notes = [48, 52, 54, 58]
    readings = disambiguate_tensions(calculate_actual_intervals(notes, 0), 0,
                                     has_maj3=True, has_min3=False, has_7th=True, has_perfect5=False)
    compare(readings.interval6_is_sharp11, False)

    # but a tritone voiced above the octave is always #11:
    notes = [48, 52, 58, 66]
    readings = disambiguate_tensions(calculate_actual_intervals(notes, 0), 0,
                                     has_maj3=True, has_min3=False, has_7th=True, has_perfect5=False)
    compare(readings.interval6_is_sharp11, True)
    compare(str(readings), 'TensionDisambiguation(b3, #11, b13)')
