from ..spelling import (get_root_spelling, get_chord_tone_spelling, should_prefer_flat,
                        get_chord_tone_with_tension, get_sharp_spelling)
from .testing_tools import compare

import pytest

def test_root_spelling():
    # natural roots are never respelled:
    compare([get_root_spelling(pc) for pc in (0, 2, 4, 5, 7, 9, 11)], ['C', 'D', 'E', 'F', 'G', 'A', 'B'])
    compare(get_root_spelling(1), 'C#')
    compare(get_root_spelling(1, [10, 3, 5]), 'Db')   # Bb, Eb, F context
    compare(get_root_spelling(3), 'Eb')
    compare(get_root_spelling(3, [4, 11, 6]), 'D#')   # E, B, F# context
    compare(get_root_spelling(6), 'F#')
    compare(get_root_spelling(6, [1, 6, 10]), 'Gb')   # Db, Gb, Bb context
    compare(get_root_spelling(6, [1, 6, 10, 11]), 'F#')
    compare(get_root_spelling(8), 'Ab')
    compare(get_root_spelling(8, [4, 9, 11]), 'G#')   # E, A, B context
    compare(get_root_spelling(10), 'Bb')
    compare(get_root_spelling(10, [11, 6]), 'A#')     # B, F# context
    # mixed sharp and flat indicators fall back to the default:
    compare(get_root_spelling(8, [4, 9, 3]), 'Ab')

def test_chord_tone_spelling():
    compare([get_chord_tone_spelling(pc, 0) for pc in (0, 4, 7, 11)], ['C', 'E', 'G', 'B'])
    compare([get_chord_tone_spelling(pc, 5) for pc in (5, 9, 0, 4)], ['F', 'A', 'C', 'E'])
    compare([get_chord_tone_spelling(pc, 10) for pc in (10, 2, 5, 9)], ['Bb', 'D', 'F', 'A'])
    compare([get_chord_tone_spelling(pc, 6) for pc in (6, 10, 1, 5)], ['F#', 'A#', 'C#', 'E#'])
    compare(get_chord_tone_spelling(3, 0), 'Eb')
    compare(get_chord_tone_spelling(8, 5), 'Ab')
    compare(get_chord_tone_spelling(1, 10), 'Db')
    compare(get_chord_tone_spelling(3, 5), 'Eb')
    compare(get_chord_tone_spelling(8, 10), 'Ab')

def test_flat_preference():
    compare([should_prefer_flat(pc) for pc in (0, 7, 2, 9, 4, 11, 6, 1)], [False]*8)
    compare([should_prefer_flat(pc) for pc in (5, 10, 3, 8)], [True]*4)

def test_sharp_spelling():
    compare(get_sharp_spelling(0, 2), 'D#')
    compare(get_sharp_spelling(0, 5), 'F#')
    compare(get_sharp_spelling(3, 2), 'F#')   # F above Eb, raised
    compare(get_sharp_spelling(10, 7), 'F#')  # F above Bb, raised
    compare(get_sharp_spelling(8, 2), 'B')    # Bb above Ab, raised by removing the flat

def test_tension_spelling():
    # b9:
    compare(get_chord_tone_with_tension(1, 0, '7b9'), 'Db')
    # #9 vs b3:
    compare(get_chord_tone_with_tension(3, 0, '7#9'), 'D#')
    compare(get_chord_tone_with_tension(3, 0, 'min7'), 'Eb')
    compare(get_chord_tone_with_tension(3, 0, '', 15), 'D#')
    compare(get_chord_tone_with_tension(3, 0, '', 3), 'Eb')
    # #11 vs b5:
    compare(get_chord_tone_with_tension(6, 0, 'Maj7#11'), 'F#')
    compare(get_chord_tone_with_tension(6, 0, '', 18), 'F#')
    compare(get_chord_tone_with_tension(6, 0, '7b5'), 'F#')
    compare(get_chord_tone_with_tension(11, 5, 'Maj7#11'), 'B')
    # #5 vs b13:
    compare(get_chord_tone_with_tension(8, 0, 'aug'), 'G#')
    compare(get_chord_tone_with_tension(8, 0, '7#5'), 'G#')
    compare(get_chord_tone_with_tension(8, 0, '7b13'), 'Ab')
    compare(get_chord_tone_with_tension(8, 0, '', 8), 'G#')
    compare(get_chord_tone_with_tension(8, 0, '', 20), 'Ab')

    # everything else passes through the root's spelling:
    compare([get_chord_tone_with_tension(pc, 0, 'any') for pc in (0, 4, 7, 11, 10, 2, 5, 9)],
            ['C', 'E', 'G', 'B', 'Bb', 'D', 'F', 'A'])

    with pytest.raises(ValueError):
        get_chord_tone_with_tension(3, 12, '7#9')

def test_root_tone_spelling():
    from ..notes import ROOT_SPELLING
    # every root spells itself as the first entry of its own row:
    for root in range(12):
        compare(get_chord_tone_spelling(root, root), ROOT_SPELLING[root].scale[0])
        compare(get_chord_tone_with_tension(root, root, ''), ROOT_SPELLING[root].scale[0])
