### enharmonic spelling of chord roots and chord tones.
### the root of a chord is spelled with reference to the other notes being
### played (so that e.g. pitch class 1 reads as Db in a chord full of flats),
### and every chord tone is then spelled relative to that root.

from .notes import ROOT_SPELLING, check_pitch_class, get_root_scale
from .tensions import get_tension_quality
from .util import log, contains_any

# pitch classes whose presence suggests sharp or flat spellings for an ambiguous root:
SHARP_INDICATORS = {6, 1, 8, 4, 11}
FLAT_INDICATORS = {10, 3, 5}

def get_root_spelling(root_pitch_class, context=None):
    """accepts the pitch class of a chord root, and optionally the pitch classes
    of the other notes in the chord, and returns the root's spelled name.
    the five black-key roots are spelled as sharps or flats depending on context,
    and the white-key roots are always natural."""
    check_pitch_class(root_pitch_class)
    context = set() if context is None else {c % 12 for c in context}

    sharps = contains_any(context, SHARP_INDICATORS)
    flats = contains_any(context, FLAT_INDICATORS)

    if root_pitch_class == 1:
        spelling = 'Db' if (flats and not sharps) else 'C#'
    elif root_pitch_class == 3:
        spelling = 'D#' if (sharps and not flats and contains_any(context, {4, 11, 6})) else 'Eb'
    elif root_pitch_class == 6:
        spelling = 'Gb' if (flats and contains_any(context, {1, 8}) and 4 not in context and 11 not in context) else 'F#'
    elif root_pitch_class == 8:
        spelling = 'G#' if (sharps and not flats and contains_any(context, {4, 9, 11})) else 'Ab'
    elif root_pitch_class == 10:
        spelling = 'A#' if (sharps and not flats and contains_any(context, {11, 6})) else 'Bb'
    else:
        spelling = ROOT_SPELLING[root_pitch_class].scale[0]
    log(f'Root {root_pitch_class} in context {sorted(context)} is spelled: {spelling}')
    return spelling

def get_chord_tone_spelling(pitch_class, root_pitch_class):
    """returns the name of pitch_class as spelled in a chord on root_pitch_class"""
    check_pitch_class(pitch_class)
    scale = get_root_scale(root_pitch_class)
    return scale[(pitch_class - root_pitch_class) % 12]

def should_prefer_flat(root_pitch_class):
    """returns True if chords on this root are generally spelled with flats"""
    check_pitch_class(root_pitch_class)
    return ROOT_SPELLING[root_pitch_class].use_flat

def get_sharp_spelling(root_pitch_class, degree):
    """returns the note a semitone above the spelled degree of this root, written
    as a raised version of that degree: the flat is removed if it has one,
    otherwise a sharp is appended. e.g. above C, degree 2 (D) gives D#,
    and above Eb, degree 2 (F) gives F#."""
    base = get_root_scale(root_pitch_class)[degree]
    if 'b' in base:
        return base.replace('b', '', 1)
    return f'{base}#'

def get_tension_spellings(root_pitch_class):
    """returns a dict that maps the four ambiguous intervals (1, 3, 6, 8)
    to their natural, sharp and flat spellings above this root"""
    scale = get_root_scale(root_pitch_class)
    return {
        1: {'natural': scale[1], 'sharp': scale[1], 'flat': scale[1]},    # b9
        3: {'natural': scale[3], 'sharp': get_sharp_spelling(root_pitch_class, 2), 'flat': scale[3]},  # b3 or #9
        6: {'natural': scale[6], 'sharp': get_sharp_spelling(root_pitch_class, 5), 'flat': scale[6]},  # b5 or #11
        8: {'natural': scale[8], 'sharp': get_sharp_spelling(root_pitch_class, 7), 'flat': scale[8]},  # #5 or b13
        }

def get_chord_tone_with_tension(pitch_class, root_pitch_class, pattern_name, actual_interval=None):
    """spells a chord tone with awareness of the chord's tensions.
    the four ambiguous intervals above the root are spelled according to how
    the chord name and (if given) the actual played interval say they function:
    e.g. pitch class 3 above C is D# in a 7#9 chord but Eb in a min7 chord."""
    check_pitch_class(pitch_class)
    check_pitch_class(root_pitch_class)
    interval = (pitch_class - root_pitch_class) % 12
    if interval not in (1, 3, 6, 8):
        return get_root_scale(root_pitch_class)[interval]
    quality = get_tension_quality(pattern_name, interval, actual_interval)
    return get_tension_spellings(root_pitch_class)[interval][quality]
