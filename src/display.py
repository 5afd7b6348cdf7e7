from .util import log


class DataFrame:
    def __init__(self, colnames):
        self.column_names = colnames
        self.num_columns = len(colnames)
        self.column_data = {i:[] for i in range(self.num_columns)}

        self.row_data = []
        self.num_rows = 0

    def append(self, data_lst):
        """add a row of data to this dataframe, which we store as objects"""
        assert len(data_lst) == self.num_columns, f"tried to append row of length {len(data_lst)} but dataframe has {self.num_columns} columns"
        row = data_lst
        self.row_data.append(row)
        self.num_rows += 1

        for i, item in enumerate(row):
            self.column_data[i].append(item)

    def __len__(self):
        """DataFrame length is the number of rows"""
        return self.num_rows

    def column_widths(self, up_to_row=None):
        """return the max str size in each column, up to a specified row"""
        widths = []
        for col_num, col in self.column_data.items():
            col_strs = [str(c) for c in col[:up_to_row]]
            str_lens = [len(s) for s in col_strs] + [len(self.column_names[col_num])]
            widths.append(max(str_lens))
        return widths

    def render(self, margin=' ', header_border=True, max_rows=None):
        """returns the rows of this dataframe as a list of aligned strings, header first"""
        margin_size = len(margin)
        printed_rows = []
        widths = self.column_widths(up_to_row=max_rows)
        # make header:
        header_row = [f'{self.column_names[i]:{widths[i]}}' for i in range(self.num_columns)]
        printed_rows.append(margin.join(header_row))
        if header_border:
            total_width = sum(widths) + (self.num_columns-1)*margin_size
            printed_rows.append('='*total_width)
        # make rows:
        for row in self.row_data[:max_rows]:
            this_row = [f'{str(row[i]):{widths[i]}}' for i in range(self.num_columns)]
            printed_rows.append(margin.join(this_row))
        return printed_rows

    def show(self, margin=' ', header_border=True, max_rows=None):
        # finally, print result:
        print('\n'.join(self.render(margin=margin, header_border=header_border, max_rows=max_rows)))


def chord_table(note_sets, show_tones=True, **kwargs):
    """accepts a list of MIDI note lists, and prints a table of their chord analyses,
    with the spelled chord tones of each if show_tones is True"""
    from .matching import analyze_chord
    from .chords import label_chord_tones

    columns = ['Notes', 'Chord', 'Root', 'Bass', 'Rootless']
    if show_tones:
        columns.append('Tones')
    df = DataFrame(columns)
    for notes in note_sets:
        analysis = analyze_chord(notes)
        if analysis is None:
            log('Skipping empty note set in chord table')
            continue
        row = [' '.join(str(n) for n in sorted(notes)), analysis.display, analysis.root, analysis.bass,
               '' if analysis.is_fallback else ('yes' if analysis.is_rootless else 'no')]
        if show_tones:
            row.append(' '.join(f'{t.name}({t.interval})' for t in label_chord_tones(notes, analysis)))
        df.append(row)
    df.show(**kwargs)
    return df
