### the chord matching engine: generates every plausible reading of a set of
### MIDI notes as a chord pattern on some root, scores them, picks the best,
### refines its name against the actual voicing, and spells the result.

from . import _settings
from .chords import Match, ChordAnalysis
from .config.def_chords import CHORD_PATTERNS
from .disambiguation import refine_match
from .intervals import calculate_actual_intervals
from .parsing import parse_midi_notes
from .spelling import get_root_spelling, get_chord_tone_spelling
from .util import log, unique_sorted

import numbers
import numpy as np


def calculate_extra_notes_penalty(extra_intervals, pattern_intervals):
    """accepts the played intervals that are not part of a chord pattern,
    and that pattern's intervals, and returns the total score penalty for them.
    common extensions (9th, 11th, 13th) cost little, and less still when the
    pattern already has a 7th, while any other extra note costs a lot."""
    pattern_has_7th = (10 in pattern_intervals) or (11 in pattern_intervals)
    penalty = 0
    for interval in extra_intervals:
        if interval in _settings.COMMON_EXTENSIONS:
            penalty += _settings.EXTENSION_PENALTY_WITH_7TH if pattern_has_7th else _settings.EXTENSION_PENALTY
        else:
            penalty += _settings.NON_EXTENSION_PENALTY
    return penalty


#### the pattern catalogue as boolean grids, one row per pattern and one column per interval,
# so that every pattern can be checked against a root's intervals at once:
PATTERN_GRID = np.zeros((len(CHORD_PATTERNS), 12), dtype=bool)
for i, pattern in enumerate(CHORD_PATTERNS):
    PATTERN_GRID[i, list(pattern.intervals)] = True
# and the penalty that each interval would cost as an extra note over each pattern:
PENALTY_GRID = np.asarray([[calculate_extra_notes_penalty([iv], pattern.intervals) for iv in range(12)]
                            for pattern in CHORD_PATTERNS], dtype=int)
PRIORITIES = np.asarray([p.priority for p in CHORD_PATTERNS], dtype=int)
ALLOW_OMIT_5TH = np.asarray([p.allow_omit_5th for p in CHORD_PATTERNS], dtype=bool)
PATTERN_SIZES = np.asarray([len(p) for p in CHORD_PATTERNS], dtype=int)


def check_notes(active_notes):
    """validates a sequence of MIDI notes, and returns them as a list of ints"""
    notes = list(active_notes)
    for n in notes:
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise TypeError(f'MIDI notes must be integers, but got {n!r} of type: {type(n)}')
    return [int(n) for n in notes]

def pitch_class_row(unique_pcs):
    """boolean row of length 12, True where a pitch class is sounded"""
    row = np.zeros(12, dtype=bool)
    row[list(unique_pcs)] = True
    return row


def find_matches(unique_pcs):
    """accepts the sorted unique pitch classes of a chord, and returns every
    candidate Match for them, in root-then-catalogue order (unsorted).

    rooted candidates are tried on each sounded pitch class, as an exact match,
    a superset match (extra notes penalised), or a match with the 5th omitted.
    rootless candidates are tried on each pitch class that is not sounded,
    for patterns of 4 or more notes, with or without their 5th."""
    pc_row = pitch_class_row(unique_pcs)
    matches = []

    ### rooted candidates:
    for root in unique_pcs:
        played = np.roll(pc_row, -root) # played intervals above this root
        missing = PATTERN_GRID & ~played
        extras = played & ~PATTERN_GRID
        num_missing = missing.sum(axis=1)
        num_extras = extras.sum(axis=1)
        penalties = (extras * PENALTY_GRID).sum(axis=1)

        is_exact = (num_missing == 0) & (num_extras == 0)
        is_superset = (num_missing == 0)
        # only the 5th is missing, and the pattern is allowed to leave it out:
        is_omit_5th = ALLOW_OMIT_5TH & (num_missing == 1) & missing[:,7]

        for p, pattern in enumerate(CHORD_PATTERNS):
            if is_exact[p]:
                score = pattern.priority * _settings.PRIORITY_SCALE + _settings.EXACT_MATCH_BONUS
                matches.append(Match(pattern, root, int(score), is_rootless=False, is_exact=True))
            elif is_superset[p]:
                score = pattern.priority * _settings.PRIORITY_SCALE - penalties[p]
                matches.append(Match(pattern, root, int(score)))
            elif is_omit_5th[p]:
                score = pattern.priority * _settings.PRIORITY_SCALE - _settings.OMIT_5TH_PENALTY - penalties[p]
                matches.append(Match(pattern, root, int(score)))

    num_rooted = len(matches)

    ### rootless candidates:
    for root in range(12):
        if pc_row[root]:
            continue
        played = np.roll(pc_row, -root)
        missing = PATTERN_GRID & ~played
        extras = played & ~PATTERN_GRID
        num_missing = missing.sum(axis=1)
        penalties = (extras * PENALTY_GRID).sum(axis=1)

        # the root is never played here, so it is always one of the missing intervals:
        rootless_full = (PATTERN_SIZES >= 4) & (num_missing == 1)
        # missing only the root and the 5th, with at least two other pattern tones present:
        rootless_omit_5th = ((PATTERN_SIZES >= 4) & ALLOW_OMIT_5TH & ~played[7]
                             & ((num_missing - missing[:,0] - missing[:,7]) == 0)
                             & ((PATTERN_SIZES - PATTERN_GRID[:,0] - PATTERN_GRID[:,7]) >= 2))

        for p, pattern in enumerate(CHORD_PATTERNS):
            if rootless_full[p]:
                score = pattern.priority * _settings.ROOTLESS_PRIORITY_SCALE - _settings.ROOTLESS_PENALTY - penalties[p]
                matches.append(Match(pattern, root, int(score), is_rootless=True))
            if rootless_omit_5th[p]:
                score = pattern.priority * _settings.ROOTLESS_OMIT_5TH_PRIORITY_SCALE - _settings.ROOTLESS_OMIT_5TH_PENALTY - penalties[p]
                matches.append(Match(pattern, root, int(score), is_rootless=True))

    log(f'Found {len(matches)} candidate matches for pitch classes {list(unique_pcs)} ({num_rooted} rooted, {len(matches)-num_rooted} rootless)')
    return matches

def rank_matches(matches):
    """sorts candidate matches by score, best first.
    python's sort is stable, so equal scores keep their generation order."""
    return sorted(matches, key=lambda m: m.score, reverse=True)

def rank_chords(active_notes):
    """accepts a sequence of MIDI notes and returns the ranked list
    of every candidate Match for them, before any refinement of the best"""
    notes = check_notes(active_notes)
    unique_pcs = unique_sorted(n % 12 for n in notes)
    return rank_matches(find_matches(unique_pcs))


def fallback_analysis(sorted_notes, unique_pcs):
    """the raw description of a set of notes that matched no chord pattern:
    every note is spelled relative to the bass, with no chord quality"""
    bass_pc = sorted_notes[0] % 12
    bass_name = get_root_spelling(bass_pc, unique_pcs)
    display = ' '.join(get_chord_tone_spelling(n % 12, bass_pc) for n in sorted_notes)
    intervals = tuple(sorted((pc - bass_pc) % 12 for pc in unique_pcs))
    log(f'No chord patterns matched, falling back on raw spelling: {display}')
    return ChordAnalysis(root=bass_name, quality='', bass=bass_name, display=display,
                         intervals=intervals, detected_root_pitch_class=bass_pc)


def analyze_chord(active_notes):
    """accepts a sequence of MIDI note numbers (in any order, with any doublings)
    and returns a ChordAnalysis naming the chord they make,
    or None if no notes were given.

    e.g. analyze_chord([64, 67, 71, 72]).display == 'CMaj7/E'"""
    notes = check_notes(active_notes)
    if len(notes) == 0:
        return None

    sorted_notes = sorted(notes)
    bass_pc = sorted_notes[0] % 12
    unique_pcs = unique_sorted(n % 12 for n in sorted_notes)

    matches = rank_matches(find_matches(unique_pcs))
    if len(matches) == 0:
        return fallback_analysis(sorted_notes, unique_pcs)

    best = matches[0]
    log(f'Best initial match: {best}')

    actual_intervals = calculate_actual_intervals(sorted_notes, best.root)
    best = refine_match(best, matches, actual_intervals, unique_pcs)

    root_name = get_root_spelling(best.root, unique_pcs)
    bass_name = get_chord_tone_spelling(bass_pc, best.root)
    is_inversion = (best.root != bass_pc) and not best.is_rootless

    display = f'{root_name}{best.name}'
    if best.is_rootless:
        display += ' (rootless)'
    if is_inversion:
        display += f"{_settings.CHARACTERS['bass']}{bass_name}"

    analysis = ChordAnalysis(root=root_name,
                             quality=best.name,
                             bass=bass_name,
                             display=display,
                             intervals=best.pattern.intervals,
                             detected_root_pitch_class=best.root,
                             is_rootless=best.is_rootless,
                             actual_intervals=tuple(a.actual_interval for a in actual_intervals))
    log(f'Analysed {sorted_notes} as: {analysis.display}')
    return analysis


def matching_chords(notes, display=True, max_results=10, **kwargs):
    """accepts a list of MIDI notes, or a string of note names like 'C4 E4 G4 Bb4',
    and either prints a table of the best-scoring candidate chords for them (if display=True),
    or returns the candidate Matches as a list (if display=False).
    the candidates are shown as ranked by the matcher, before the best one is refined."""
    midi_notes = check_notes(parse_midi_notes(notes))
    ranked = rank_chords(midi_notes)[:max_results]
    unique_pcs = unique_sorted(n % 12 for n in midi_notes)

    if display:
        from .display import DataFrame
        # print result as nice dataframe instead of returning a list
        print(f'Chord matches for notes: {midi_notes}')
        if len(ranked) == 0:
            print('(no matching chord patterns)')
            return
        exact_char, rootless_char = _settings.CHARACTERS['exact'], _settings.CHARACTERS['rootless']
        df = DataFrame(['', 'Chord', 'Intervals', 'Score', 'Exact', 'Rootless'])
        for i, match in enumerate(ranked):
            chord_name = f'{get_root_spelling(match.root, unique_pcs)}{match.name}'
            intervals_str = ' '.join(str(iv) for iv in match.pattern.intervals)
            df.append([str(i+1), chord_name, intervals_str, match.score,
                       exact_char if match.is_exact else '',
                       rootless_char if match.is_rootless else ''])
        kwargs.setdefault('margin', ' ')
        df.show(max_rows=max_results, **kwargs)
    else:
        return ranked
