### this module contains the pitch-class naming tables used across chordsense:
### plain sharp and flat note names, and the hand-authored enharmonic spelling
### table that says how each interval above a given chord root should be written.
### it also contains NoteDetails, a description of a single MIDI note.

from . import _settings
from .util import log

from dataclasses import dataclass
import numbers

NOTES = ('C', 'C#', 'D', 'D#', 'E', 'F', 'F#', 'G', 'G#', 'A', 'A#', 'B')
NOTES_FLAT = ('C', 'Db', 'D', 'Eb', 'E', 'F', 'Gb', 'G', 'Ab', 'A', 'Bb', 'B')


@dataclass(frozen=True)
class RootSpelling:
    """how the 12 intervals above a root should be spelled.
    use_flat is the root's general accidental preference,
    and scale[i] is the name of the note i semitones above the root."""
    use_flat: bool
    scale: tuple

    def __post_init__(self):
        assert len(self.scale) == 12, f'RootSpelling needs 12 note names, but got {len(self.scale)}'


### spelling table by root pitch class. each row follows lead-sheet convention
### for chords on that root (e.g. the b7 above C is Bb, the 7th above F# is E#),
### including theoretical spellings like E# or Cb.
ROOT_SPELLING = {
     0: RootSpelling(False, ('C',  'Db', 'D',  'Eb', 'E',  'F',  'F#', 'G',  'Ab', 'A',  'Bb', 'B' )),
     1: RootSpelling(False, ('C#', 'D',  'D#', 'E',  'E#', 'F#', 'G',  'G#', 'A',  'A#', 'B',  'B#')),
     2: RootSpelling(False, ('D',  'Eb', 'E',  'F',  'F#', 'G',  'Ab', 'A',  'Bb', 'B',  'C',  'C#')),
     3: RootSpelling(True,  ('Eb', 'Fb', 'F',  'Gb', 'G',  'Ab', 'A',  'Bb', 'Cb', 'C',  'Db', 'D' )),
     4: RootSpelling(False, ('E',  'F',  'F#', 'G',  'G#', 'A',  'Bb', 'B',  'C',  'C#', 'D',  'D#')),
     5: RootSpelling(True,  ('F',  'Gb', 'G',  'Ab', 'A',  'Bb', 'B',  'C',  'Db', 'D',  'Eb', 'E' )),
     6: RootSpelling(False, ('F#', 'G',  'G#', 'A',  'A#', 'B',  'C',  'C#', 'D',  'D#', 'E',  'E#')),
     7: RootSpelling(False, ('G',  'Ab', 'A',  'Bb', 'B',  'C',  'Db', 'D',  'Eb', 'E',  'F',  'F#')),
     8: RootSpelling(True,  ('Ab', 'A',  'Bb', 'Cb', 'C',  'Db', 'D',  'Eb', 'Fb', 'F',  'Gb', 'G' )),
     9: RootSpelling(False, ('A',  'Bb', 'B',  'C',  'C#', 'D',  'Eb', 'E',  'F',  'F#', 'G',  'G#')),
    10: RootSpelling(True,  ('Bb', 'Cb', 'C',  'Db', 'D',  'Eb', 'Fb', 'F',  'Gb', 'G',  'Ab', 'A' )),
    11: RootSpelling(False, ('B',  'C',  'C#', 'D',  'D#', 'E',  'F',  'F#', 'G',  'G#', 'A',  'A#')),
    }


def check_pitch_class(pitch_class):
    """raises an error if pitch_class is not an integer from 0 to 11"""
    if isinstance(pitch_class, bool) or not isinstance(pitch_class, numbers.Integral):
        raise TypeError(f'Pitch class must be an integer, but got: {type(pitch_class)}')
    if not (0 <= pitch_class <= 11):
        raise ValueError(f'Pitch class must be between 0 and 11, but got: {pitch_class}')

def get_note_name(pitch_class, prefer_flat=False):
    """accepts a pitch class from 0 to 11 and returns its plain name,
    with flats if prefer_flat is True and sharps otherwise"""
    check_pitch_class(pitch_class)
    return NOTES_FLAT[pitch_class] if prefer_flat else NOTES[pitch_class]

def get_root_scale(root_pitch_class):
    """returns the 12 interval spellings above the chord root with this pitch class"""
    check_pitch_class(root_pitch_class)
    return ROOT_SPELLING[root_pitch_class].scale


@dataclass(frozen=True)
class NoteDetails:
    """a single MIDI note, described by its sharp pitch-class name and octave,
    where middle C (MIDI 60) is C4"""
    note: str
    octave: int
    name: str
    midi: int

    _marker = _settings.MARKERS['ToneLabel']

    def __str__(self):
        return f'{self._marker}{self.name}'

def get_note_details(midi: int):
    """accepts a MIDI note number and returns its NoteDetails,
    e.g. 60 -> C4, 21 -> A0, 127 -> G9"""
    if isinstance(midi, bool) or not isinstance(midi, numbers.Integral):
        raise TypeError(f'MIDI note must be an integer, but got: {type(midi)}')
    note = NOTES[midi % 12]
    octave = (midi // 12) - 1
    details = NoteDetails(note=note, octave=octave, name=f'{note}{octave}', midi=midi)
    log(f'MIDI note {midi} is {details.name}')
    return details
