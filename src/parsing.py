#### string parsing functions
from .util import log

################### accidentals

# map semitone offset values to accidental character aliases:
offset_accidentals = {-2: ['𝄫', '♭♭', 'bb'],
                -1: ['♭', 'b'],
                 0: ['', '♮', 'N'],
                 1: ['♯', '#'],
                 2: ['𝄪', '♯♯', '##']}
# map accidental aliases to offsets:
accidental_offsets = {acc: offset for offset, accs in offset_accidentals.items() for acc in accs}

# mapping of accidental aliases to canonical ascii strings (i.e. #, ##, b, bb)
accidentals_to_ascii = {char: chars[-1] for chars in offset_accidentals.values() for char in chars}


################### note names

natural_note_names = ['C', 'D', 'E', 'F', 'G', 'A', 'B']
natural_note_positions = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}

# map every note name (natural, sharp, flat, double sharp, double flat,
# in ascii or unicode) to its pitch class, where C is 0:
note_positions = {}
for n in natural_note_names:
    for offset, accidentals in offset_accidentals.items():
        for acc in accidentals:
            acc_note_name = f'{n}{acc}' # e.g C# or D𝄫
            note_positions[acc_note_name] = (natural_note_positions[n] + offset) % 12


################### note name parsing functions:

def is_valid_note_name(name: str, case_sensitive=True):
    """returns True if string can be parsed as a note name like 'C' or 'Eb',
    and False if it cannot"""
    if not isinstance(name, str) or not (0 < len(name) < 4):
        return False
    if not case_sensitive:
        # force first char to upper case and rest to lower, in case we've been
        # given e.g. lowercase 'c' or 'eb', which are valid if not case_sensitive
        name = name[0].upper() + name[1:].lower()
    return name in note_positions


def begins_with_valid_note_name(name: str):
    """checks if a string contains a valid note name in its first three characters.
    returns the length of the note name found, or False if there is none."""
    for length in [3, 2, 1]:
        if len(name) >= length and is_valid_note_name(name[:length]):
            return length
    return False

def note_split(name, graceful_fail=False, strip=True):
    """takes a string that contains a note in its first few characters
    (like the name of a chord, e.g. F#sus4)
    splits out the note name, and returns it along with the remaining substring
    as a (note_name, remainder) tuple.
    if graceful_fail, returns False on failure to parse instead of raising error.
    if strip, strips whitespace from the remainder string before returning."""
    note_idx = begins_with_valid_note_name(name)
    if note_idx is False:
        if graceful_fail:
            return False
        else:
            raise ValueError(f'No valid note name found in first 3 characters of: {name}')
    note_name, remainder = name[:note_idx], name[note_idx:]
    if strip:
        remainder = remainder.strip()
    return note_name, remainder

def parse_note_name(name: str, case_sensitive=True):
    """accepts a note name like 'C' or 'F#' or 'B♭',
    and returns its pitch class as an integer from 0 to 11."""
    if not isinstance(name, str):
        raise TypeError(f'parse_note_name expected str input but got: {type(name)}')
    if not case_sensitive and len(name) > 0:
        name = name[0].upper() + name[1:].lower()
    if name not in note_positions:
        raise ValueError(f'Not a valid note name: {name}')
    return note_positions[name]

def parse_octave_note_name(name: str):
    """Takes the name of a note in a specific octave as a string,
    for example 'C4' or 'A#3' or 'Gb1' or 'C-1',
    and returns its MIDI note number (where C4, i.e. middle C, is 60)."""
    if not isinstance(name, str):
        raise TypeError(f'parse_octave_note_name expected str input but got: {type(name)}')
    result = note_split(name, graceful_fail=True, strip=False)
    if result is False:
        raise ValueError(f'Could not parse octave note name: {name}')
    note_name, octave_str = result
    # the octave may be negative, i.e. C-1 is MIDI note 0
    digits = octave_str[1:] if octave_str.startswith('-') else octave_str
    if len(digits) == 0 or not digits.isdigit():
        raise ValueError(f'Could not parse octave note name: {name}, expected an octave number after {note_name}')
    octave = int(octave_str)
    pitch_class = parse_note_name(note_name)

    # the natural note, not the pitch class, determines the octave,
    # so that B#3 is the same key as C4 and Cb4 is the same key as B3:
    natural_position = natural_note_positions[note_name[0]]
    offset = accidental_offsets[accidentals_to_ascii[note_name[1:]]] if len(note_name) > 1 else 0
    midi = (octave + 1) * 12 + natural_position + offset
    log(f'Parsed {name} as pitch class {pitch_class}, MIDI note {midi}')
    return midi

def parse_out_note_names(note_string, graceful_fail=False):
    """for some string of valid note names, of undetermined length,
    such as e.g.: 'C4 E4 G4' or 'C4,Eb4,G4', or 'CEG' without octaves,
    parse out the individual note names and return them as a list.
    if graceful_fail, returns False upon failure to parse, instead of error."""

    assert isinstance(note_string, str), f'parse_out_note_names expected str input but got: {type(note_string)}'

    # try looking for obvious split chars first:
    for char in ', -':
        if char in note_string and not (char == '-' and any(c.isdigit() for c in note_string)):
            return [n.strip() for n in note_string.split(char) if len(n.strip()) > 0]

    # otherwise split note-by-note, keeping any octave digits with their note:
    note_list = []
    rest = note_string
    while len(rest) > 0:
        result = note_split(rest, graceful_fail=True)
        if result is False:
            if graceful_fail:
                return False
            else:
                raise ValueError(f'Error while parsing out note names from {note_string}: No valid note names found in {rest} (note names found so far: {note_list})')
        note_name, rest = result
        octave_chars = ''
        while len(rest) > 0 and (rest[0].isdigit() or (rest[0] == '-' and len(rest) > 1 and rest[1].isdigit())):
            octave_chars += rest[0]
            rest = rest[1:]
        note_list.append(note_name + octave_chars)
    return note_list

def parse_midi_notes(notes, default_octave=4):
    """accepts a string of note names like 'C4 E4 G4', or a list of note names
    and/or integers, and returns a list of MIDI note numbers.
    note names given without an octave are placed in default_octave."""
    if isinstance(notes, str):
        notes = parse_out_note_names(notes)
    midi_notes = []
    for n in notes:
        if isinstance(n, str):
            if len(n.strip()) == 0:
                raise ValueError(f'Empty note name in note list: {notes}')
            n = n.strip()
            if n[-1].isdigit():
                midi_notes.append(parse_octave_note_name(n))
            else:
                midi_notes.append(parse_octave_note_name(f'{n}{default_octave}'))
        else:
            midi_notes.append(n)
    return midi_notes
