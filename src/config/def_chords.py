from dataclasses import dataclass
from ..intervals import normalize_intervals
from .. import _settings


### chord patterns and their names - for example, 'min7' and 'sus4' and '7#9' are defined in this module.
### new chord patterns can be freely added by following the examples below.

### a chord pattern is a named set of pitch-class intervals above a root.
### intervals may be written as compound intervals for readability (e.g. 14 for a 9th),
### and are reduced to sorted, unique pitch-class intervals when the pattern is defined.
### priority decides between patterns that match equally well: richer, more specific chords get higher priorities.
### allow_omit_5th lets a pattern match a voicing that leaves out its perfect fifth, as is common in jazz comping.
@dataclass(frozen=True)
class ChordPattern:
    name: str
    intervals: tuple # sorted unique pitch-class intervals, starting from 0
    priority: int
    allow_omit_5th: bool = False

    def __post_init__(self):
        if not isinstance(self.intervals, tuple):
            raise ValueError(f'ChordPattern {self.name!r} intervals must be a tuple, but got: {type(self.intervals)}')
        if len(self.intervals) == 0 or self.intervals[0] != 0:
            raise ValueError(f'ChordPattern {self.name!r} intervals must start from the root (0), but got: {self.intervals}')
        if self.intervals != normalize_intervals(self.intervals):
            raise ValueError(f'ChordPattern {self.name!r} intervals must be sorted and unique within 0-11, but got: {self.intervals}')

    @classmethod
    def define(cls, name, intervals, priority, allow_omit_5th=False):
        """constructor that accepts raw (possibly compound) intervals"""
        return cls(name=name, intervals=normalize_intervals(intervals),
                   priority=priority, allow_omit_5th=allow_omit_5th)

    def __len__(self):
        return len(self.intervals)

    def __str__(self):
        lb, rb = _settings.BRACKETS['Pattern']
        return f'{lb}{self.name}{rb} {list(self.intervals)}'


P = ChordPattern.define

### the catalogue, in search order. when two patterns score identically,
### the one listed first wins, so order matters as well as priority.
CHORD_PATTERNS = (
    # 13th chords:
    P('Maj13',   [0, 4, 7, 11, 14, 21], 65, allow_omit_5th=True),
    P('13',      [0, 4, 7, 10, 14, 21], 65, allow_omit_5th=True),
    P('min13',   [0, 3, 7, 10, 14, 21], 65, allow_omit_5th=True),
    P('13sus4',  [0, 5, 7, 10, 14, 21], 64, allow_omit_5th=True),

    # 11th chords:
    P('Maj9#11', [0, 4, 7, 11, 14, 18], 62, allow_omit_5th=True),
    P('9#11',    [0, 4, 7, 10, 14, 18], 62, allow_omit_5th=True),
    P('Maj11',   [0, 4, 7, 11, 14, 17], 60, allow_omit_5th=True),
    P('11',      [0, 4, 7, 10, 14, 17], 60, allow_omit_5th=True),
    P('min11',   [0, 3, 7, 10, 14, 17], 60, allow_omit_5th=True),

    # 9th chords:
    P('Maj9',    [0, 4, 7, 11, 14], 55, allow_omit_5th=True),
    P('9',       [0, 4, 7, 10, 14], 55, allow_omit_5th=True),
    P('min9',    [0, 3, 7, 10, 14], 55, allow_omit_5th=True),
    P('minMaj9', [0, 3, 7, 11, 14], 55, allow_omit_5th=True),
    P('9sus4',   [0, 5, 7, 10, 14], 54, allow_omit_5th=True),

    # dominants with multiple alterations:
    P('13b9',    [0, 4, 7, 10, 13, 21], 66, allow_omit_5th=True),
    P('13#9',    [0, 4, 7, 10, 15, 21], 66, allow_omit_5th=True),
    P('7b9#11',  [0, 4, 7, 10, 13, 18], 58, allow_omit_5th=True),
    P('7#9#11',  [0, 4, 7, 10, 15, 18], 58, allow_omit_5th=True),
    P('7b9b13',  [0, 4, 7, 10, 13, 20], 58),
    P('7#9b13',  [0, 4, 7, 10, 15, 20], 58),
    P('7alt',    [0, 4, 6, 10, 13, 15], 59),

    P('Maj7#9',  [0, 4, 7, 11, 15], 56, allow_omit_5th=True),

    # dominants with a single alteration, or an altered 5th and 9th:
    P('7#9',     [0, 4, 7, 10, 15], 54, allow_omit_5th=True),   # 'hendrix' chord
    P('7b9',     [0, 4, 7, 10, 13], 54, allow_omit_5th=True),
    P('7#5#9',   [0, 4, 8, 10, 15], 56),
    P('7#5b9',   [0, 4, 8, 10, 13], 56),
    P('7b5b9',   [0, 4, 6, 10, 13], 56),
    P('7b5#9',   [0, 4, 6, 10, 15], 56),
    P('7b13',    [0, 4, 7, 10, 20], 53),

    # half-diminished extensions:
    P('m9b5',    [0, 3, 6, 10, 14], 56),
    P('m11b5',   [0, 3, 6, 10, 14, 17], 58),
    P('m7b5(11)', [0, 3, 6, 10, 17], 54),

    # lydian chords:
    P('Maj7#11', [0, 4, 7, 11, 18], 52, allow_omit_5th=True),
    P('7#11',    [0, 4, 7, 10, 18], 52, allow_omit_5th=True),

    # 6/9 chords:
    P('6/9',     [0, 4, 7, 9, 14], 52, allow_omit_5th=True),
    P('min6/9',  [0, 3, 7, 9, 14], 52, allow_omit_5th=True),

    # suspended 7ths:
    P('7sus4',   [0, 5, 7, 10], 46),
    P('7sus2',   [0, 2, 7, 10], 46),
    P('Maj7sus4', [0, 5, 7, 11], 46),
    P('Maj7sus2', [0, 2, 7, 11], 46),

    # 7th chords:
    P('Maj7',    [0, 4, 7, 11], 45, allow_omit_5th=True),
    P('min7',    [0, 3, 7, 10], 45, allow_omit_5th=True),
    P('7',       [0, 4, 7, 10], 45, allow_omit_5th=True),
    P('dim7',    [0, 3, 6, 9],  45),
    P('m7b5',    [0, 3, 6, 10], 45),    # half-diminished
    P('minMaj7', [0, 3, 7, 11], 45, allow_omit_5th=True),
    P('Maj7#5',  [0, 4, 8, 11], 46),
    P('7#5',     [0, 4, 8, 10], 46),
    P('7b5',     [0, 4, 6, 10], 46),

    # 6th chords:
    P('6',       [0, 4, 7, 9], 42, allow_omit_5th=True),
    P('min6',    [0, 3, 7, 9], 42, allow_omit_5th=True),

    # added-tone chords:
    P('add9',    [0, 4, 7, 14], 40, allow_omit_5th=True),
    P('madd9',   [0, 3, 7, 14], 40, allow_omit_5th=True),
    P('add11',   [0, 4, 7, 17], 40, allow_omit_5th=True),
    P('madd11',  [0, 3, 7, 17], 40, allow_omit_5th=True),
    P('add#11',  [0, 4, 7, 18], 40),
    # note: add#9 and (add b3) share a pitch-class set, as do madd#9 and the minor triad (m),
    # so which one is reported depends on voicing refinement after matching
    P('add#9',   [0, 4, 7, 15], 41, allow_omit_5th=True),
    P('madd#9',  [0, 3, 7, 15], 41, allow_omit_5th=True),
    P('(add b3)', [0, 3, 4, 7], 40),
    P('m(add 3)', [0, 3, 4, 7], 39),

    # triads:
    P('',        [0, 4, 7], 35),    # major triad has no suffix
    P('m',       [0, 3, 7], 35),
    P('dim',     [0, 3, 6], 35),
    P('aug',     [0, 4, 8], 35),
    P('sus2',    [0, 2, 7], 33),
    P('sus4',    [0, 5, 7], 33),

    # major 3rd plus tritone fragments:
    P('(#11)',   [0, 4, 6], 34),
    P('(b5)',    [0, 4, 6], 33),

    # quartal voicings (stacked 4ths):
    P('quartal',  [0, 5, 10], 22),
    P('quartal4', [0, 5, 10, 15], 23),

    # power chord:
    P('5',       [0, 7], 20),
    )

chord_pattern_names = [p.name for p in CHORD_PATTERNS]
