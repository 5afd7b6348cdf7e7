from ..display import DataFrame, chord_table
from ..parsing import parse_midi_notes
from .testing_tools import compare

def test_dataframe():
    df = DataFrame(['Chord', 'Score'])
    df.append(['CMaj7', 5500])
    df.append(['Em', 4100])
    compare(len(df), 2)
    compare(df.column_widths(), [5, 5])

    rows = df.render()
    compare(rows[0], 'Chord Score')
    compare(rows[1], '='*11)
    compare(rows[2], 'CMaj7 5500 ')
    compare(rows[3], 'Em    4100 ')
    compare(len(df.render(max_rows=1)), 3)
    compare(df.render(header_border=False)[1], rows[2])

def test_chord_table():
    note_sets = [parse_midi_notes('C4 E4 G4'),
                 parse_midi_notes('E3 G3 B3 C4'),
                 [],
                 parse_midi_notes('C4 E4 G4 Bb4 D#5')]
    df = chord_table(note_sets)
    # the empty note set is skipped:
    compare(len(df), 3)
    compare(df.column_data[1], ['C', 'CMaj7/E', 'C7#9'])
    compare(df.column_data[5][2], 'C(R) E(Maj) G(Perf) Bb(min) D#(min)')

    df = chord_table([[60]], show_tones=False)
    compare(df.num_columns, 5)
    compare(df.row_data[0][1:], ['C', 'C', 'C', ''])
