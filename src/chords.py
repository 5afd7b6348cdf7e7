### this module contains the result types of chord analysis:
### Match, a single scored candidate interpretation of a set of notes,
### ChordAnalysis, the final named chord that analyze_chord returns,
### and ToneLabel, the spelled name and function of each note in the chord.

from . import _settings
from .config.def_chords import ChordPattern
from .intervals import INTERVAL_NAMES, calculate_actual_intervals
from .spelling import get_chord_tone_with_tension, get_chord_tone_spelling
from .util import log

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Match:
    """a candidate reading of the played notes as a chord pattern on some root,
    with the score it was given during matching"""
    pattern: ChordPattern
    root: int
    score: int
    is_rootless: bool = False
    is_exact: bool = False

    _marker = _settings.MARKERS['Match']

    @property
    def name(self):
        return self.pattern.name

    def renamed(self, new_name):
        """returns a copy of this Match whose pattern has a new name,
        but the same intervals and priority"""
        log(f'Renaming {self.name!r} to {new_name!r}')
        return replace(self, pattern=replace(self.pattern, name=new_name))

    def __str__(self):
        flags = []
        if self.is_exact:
            flags.append(_settings.CHARACTERS['exact'])
        if self.is_rootless:
            flags.append(_settings.CHARACTERS['rootless'])
        flag_str = f" ({' '.join(flags)})" if len(flags) > 0 else ''
        return f'{self._marker}{self.root}:{self.name!r} score={self.score}{flag_str}'


@dataclass(frozen=True)
class ChordAnalysis:
    """the result of naming a set of notes as a chord.
        root: the spelled name of the chord root, e.g. 'Eb'
        quality: the chord suffix, e.g. 'min7' (or '' for a major triad)
        bass: the spelled name of the lowest note
        display: the full chord symbol, e.g. 'CMaj7/E' or 'D7#9 (rootless)'
        intervals: the pitch-class intervals of the matched pattern
        detected_root_pitch_class: the pitch class of the root, from 0 to 11
        is_rootless: True if the root was implied rather than played
        actual_intervals: the actual interval of each played note above the root, in ascending note order
    is_rootless and actual_intervals are None when no chord pattern matched the notes."""
    root: str
    quality: str
    bass: str
    display: str
    intervals: tuple
    detected_root_pitch_class: int
    is_rootless: bool = None
    actual_intervals: tuple = None

    _marker = _settings.MARKERS['ChordAnalysis']

    @property
    def is_inversion(self):
        return (not self.is_fallback) and self.display.endswith(f"{_settings.CHARACTERS['bass']}{self.bass}")

    @property
    def is_fallback(self):
        """True if no pattern matched and this is a raw spelling of the notes"""
        return self.is_rootless is None

    def __str__(self):
        return f'{self._marker}{self.display}'

    def __repr__(self):
        lb, rb = _settings.BRACKETS['Intervals']
        return f'{self._marker}{self.display} {lb}{" ".join(str(i) for i in self.intervals)}{rb}'


@dataclass(frozen=True)
class ToneLabel:
    """a single played note, spelled and labelled by its function in a chord"""
    midi: int
    name: str
    interval: str

    _marker = _settings.MARKERS['ToneLabel']

    def __str__(self):
        return f'{self._marker}{self.name} ({self.interval})'


def interval_label(pitch_class_interval):
    """short label for an interval above the root: 'R' for the root itself,
    otherwise the quality word of its name, e.g. 'Maj' or 'Perf'"""
    if pitch_class_interval == 0:
        return 'R'
    return INTERVAL_NAMES[pitch_class_interval].split(' ')[0]

def label_chord_tones(active_notes, analysis=None):
    """accepts a list of MIDI notes and (optionally) their ChordAnalysis,
    and returns a list of ToneLabel objects, one per note in ascending order.
    each note is spelled relative to the detected root, with tensions spelled
    according to the chord quality and the voicing actually played.
    without an analysis, notes are spelled relative to the bass."""
    sorted_notes = sorted(active_notes)
    if len(sorted_notes) == 0:
        return []
    if analysis is None:
        root_pc, quality = sorted_notes[0] % 12, ''
    else:
        root_pc, quality = analysis.detected_root_pitch_class, analysis.quality

    if analysis is not None and analysis.actual_intervals is not None:
        actual_intervals = list(analysis.actual_intervals)
        if len(actual_intervals) != len(sorted_notes):
            raise ValueError(f'Analysis of {len(actual_intervals)} notes does not match the {len(sorted_notes)} notes given: {sorted_notes}')
    else:
        actual_intervals = [a.actual_interval for a in calculate_actual_intervals(sorted_notes, root_pc)]

    labels = []
    for midi, actual in zip(sorted_notes, actual_intervals):
        pc = midi % 12
        if analysis is None or analysis.is_fallback:
            name = get_chord_tone_spelling(pc, root_pc)
        else:
            name = get_chord_tone_with_tension(pc, root_pc, quality, actual)
        labels.append(ToneLabel(midi=midi, name=name, interval=interval_label((pc - root_pc) % 12)))
    return labels
