### three pitch classes above a chord root have two possible functions each,
### depending on the rest of the chord and on the voicing:
###     interval 3: a minor third (b3), or a sharp ninth (#9)
###     interval 6: a flat fifth (b5), or a sharp eleventh (#11)
###     interval 8: a sharp fifth (#5), or a flat thirteenth (b13)
### this module decides between them.

from . import _settings
from .intervals import get_actual_interval_for_pitch_class
from .util import log

from dataclasses import dataclass


def get_tension_quality(pattern_name: str, interval: int, actual_interval: int = None):
    """accepts the name of a chord pattern (e.g. '7#9'), a simple interval above
    the root, and optionally the actual played interval of that note,
    and returns one of 'natural', 'sharp' or 'flat' to say how it should be spelled.
    the actual interval takes precedence where it is given, since a note voiced
    above the octave is heard as an upper tension."""
    if actual_interval is not None:
        if interval == 3:
            return 'sharp' if (actual_interval >= _settings.SHARP_9_THRESHOLD or '#9' in pattern_name) else 'natural'
        elif interval == 6:
            return 'sharp' if (actual_interval >= _settings.SHARP_11_THRESHOLD or '#11' in pattern_name) else 'flat'
        elif interval == 8:
            return 'flat' if (actual_interval >= _settings.FLAT_13_THRESHOLD or 'b13' in pattern_name) else 'sharp'

    # otherwise, infer from the pattern name alone:
    if interval == 3:
        return 'sharp' if '#9' in pattern_name else 'natural'
    elif interval == 6:
        if '#11' in pattern_name:
            return 'sharp'
        elif 'b5' in pattern_name:
            return 'flat'
        return 'natural'
    elif interval == 8:
        if '#5' in pattern_name or 'aug' in pattern_name:
            return 'sharp'
        elif 'b13' in pattern_name:
            return 'flat'
        return 'natural'
    elif interval == 1:
        return 'flat'
    return 'natural'


@dataclass(frozen=True)
class TensionDisambiguation:
    """which way each of the three ambiguous intervals was read"""
    interval3_is_sharp9: bool = False
    interval6_is_sharp11: bool = False
    interval8_is_sharp5: bool = False

    def __str__(self):
        readings = ['#9' if self.interval3_is_sharp9 else 'b3',
                    '#11' if self.interval6_is_sharp11 else 'b5',
                    '#5' if self.interval8_is_sharp5 else 'b13']
        return f'TensionDisambiguation({", ".join(readings)})'


def disambiguate_tensions(actual_intervals, root_pitch_class, has_maj3, has_min3, has_7th, has_perfect5):
    """accepts the actual intervals of a played chord (as from calculate_actual_intervals),
    its root, and flags for which chord tones are present, and decides whether
    pitch classes 3, 6 and 8 above the root are upper tensions or chord tones.
    returns a TensionDisambiguation."""
    pc3 = (root_pitch_class + 3) % 12
    maj3 = (root_pitch_class + 4) % 12
    pc6 = (root_pitch_class + 6) % 12
    pc8 = (root_pitch_class + 8) % 12

    # interval 3 is a #9 when voiced above the octave,
    # or when it sits above the major third, or alongside a major 3rd and a 7th:
    sharp9 = False
    actual3 = get_actual_interval_for_pitch_class(actual_intervals, pc3, root_pitch_class)
    pc3_midis = [a.midi for a in actual_intervals if a.pitch_class == pc3]
    maj3_midis = [a.midi for a in actual_intervals if a.pitch_class == maj3]
    if actual3 >= _settings.SHARP_9_THRESHOLD:
        sharp9 = True
    elif has_maj3 and len(maj3_midis) > 0 and len(pc3_midis) > 0:
        sharp9 = min(pc3_midis) > min(maj3_midis)
    elif has_maj3 and has_7th and len(pc3_midis) > 0:
        sharp9 = True

    # interval 6 is a #11 when voiced high, or when the chord has both a major 3rd
    # and a perfect 5th, or a major 3rd and major 7th with no 5th to flatten:
    sharp11 = False
    actual6 = get_actual_interval_for_pitch_class(actual_intervals, pc6, root_pitch_class)
    if actual6 >= _settings.SHARP_11_THRESHOLD:
        sharp11 = True
    elif has_perfect5 and has_maj3:
        sharp11 = True
    elif has_7th and has_maj3 and not has_perfect5:
        if any((a.pitch_class - root_pitch_class) % 12 == 11 for a in actual_intervals):
            sharp11 = True

    # interval 8 is only a #5 when there is no 5th or 7th to make it an upper tension:
    sharp5 = False
    actual8 = get_actual_interval_for_pitch_class(actual_intervals, pc8, root_pitch_class)
    if actual8 >= _settings.FLAT_13_THRESHOLD:
        sharp5 = False
    elif has_perfect5:
        sharp5 = False
    elif not has_7th:
        sharp5 = True

    # has_min3 is part of the chord context, but the readings above only depend on the major 3rd
    result = TensionDisambiguation(interval3_is_sharp9=sharp9,
                                   interval6_is_sharp11=sharp11,
                                   interval8_is_sharp5=sharp5)
    log(f'Tension readings above root {root_pitch_class}: {result}')
    return result
