### this module handles intervals in two forms: as pitch-class intervals
### (semitones above a root, reduced mod 12, as used for pattern matching)
### and as 'actual' intervals, measured in the voicing that was really played,
### which can exceed an octave and tell us whether a note is a chord tone or an upper tension.

from .util import log, unique_sorted

from dataclasses import dataclass

INTERVAL_NAMES = ('Root', 'min 2nd', 'Maj 2nd', 'min 3rd', 'Maj 3rd', 'Perf 4th',
                  'Tritone', 'Perf 5th', 'min 6th', 'Maj 6th', 'min 7th', 'Maj 7th')

def normalize_intervals(intervals):
    """accepts an iterable of integer intervals (which may be compound or negative)
    and returns the sorted tuple of unique intervals mod 12.
    e.g. [0, 4, 7, 14] -> (0, 2, 4, 7), and [-1] -> (11,)"""
    return tuple(unique_sorted(i % 12 for i in intervals))


@dataclass(frozen=True)
class ActualInterval:
    """the distance in semitones from the root's lowest sounded instance
    to a specific played note"""
    pitch_class: int
    actual_interval: int
    midi: int

    def __str__(self):
        return f'{self.midi}:+{self.actual_interval}'


def root_reference_midi(sorted_notes, root_pitch_class):
    """returns the MIDI note that actual intervals are measured from:
    the lowest sounded instance of the root, or if the root is not sounded,
    the nearest virtual root at or below the lowest note."""
    for midi in sorted_notes:
        if midi % 12 == root_pitch_class:
            return midi
    lowest = sorted_notes[0]
    return lowest - ((lowest % 12 - root_pitch_class) % 12)

def calculate_actual_intervals(sorted_notes, root_pitch_class):
    """accepts a list of MIDI notes in ascending order, and the pitch class of
    the chord root, and returns a list of ActualInterval objects in the same order."""
    if len(sorted_notes) == 0:
        return []
    root_midi = root_reference_midi(sorted_notes, root_pitch_class)
    actual_intervals = [ActualInterval(pitch_class=midi % 12,
                                       actual_interval=midi - root_midi,
                                       midi=midi)
                        for midi in sorted_notes]
    log(f'Actual intervals from root {root_pitch_class} (MIDI {root_midi}): {[a.actual_interval for a in actual_intervals]}')
    return actual_intervals

def get_actual_interval_for_pitch_class(actual_intervals, target_pitch_class, root_pitch_class):
    """returns the actual interval at which target_pitch_class was played.
    if it was played in several octaves, the first instance above an octave wins
    (so that a doubled tension still reads as a tension), otherwise the lowest.
    if it was not played at all, returns its simple interval above the root."""
    matches = [a for a in actual_intervals if a.pitch_class == target_pitch_class]
    if len(matches) == 0:
        return (target_pitch_class - root_pitch_class) % 12
    for a in matches:
        if a.actual_interval > 12:
            return a.actual_interval
    return min(a.actual_interval for a in matches)
