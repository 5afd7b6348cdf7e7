### chordsense: names chords from sets of MIDI notes, with jazz-aware enharmonic spelling.

from .matching import analyze_chord, matching_chords, rank_chords, calculate_extra_notes_penalty
from .chords import ChordAnalysis, Match, ToneLabel, label_chord_tones
from .spelling import get_root_spelling, get_chord_tone_spelling, get_chord_tone_with_tension, should_prefer_flat
from .tensions import get_tension_quality, disambiguate_tensions, TensionDisambiguation
from .intervals import (normalize_intervals, calculate_actual_intervals,
                        get_actual_interval_for_pitch_class, ActualInterval, INTERVAL_NAMES)
from .notes import NOTES, NOTES_FLAT, ROOT_SPELLING, get_note_name, get_note_details, NoteDetails
from .parsing import parse_note_name, parse_octave_note_name, parse_midi_notes
from .config.def_chords import CHORD_PATTERNS, ChordPattern
from .display import chord_table
from .util import log
