from ...constants import RAGGED_ROW_POLICY, RaggedRowPolicy
from ...utils import truncate_title


class Sheet:
    """One titled table: a heading row plus data rows."""
    def __init__(self, title, headings, rows):
        self.title = title
        self.headings = list(headings)
        self.rows = [list(row) for row in rows]

    @property
    def width(self):
        return len(self.headings)

    def to_dict(self):
        return {'title': self.title, 'headings': self.headings, 'rows': self.rows}

    def __eq__(self, other):
        if not isinstance(other, Sheet):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f'<Sheet {self.title!r} {self.width} cols x {len(self.rows)} rows>'


class SheetBuilder:
    """Assembles Sheet objects with a display-safe title."""
    def __init__(self, ragged_rows=RAGGED_ROW_POLICY):
        self.ragged_rows = ragged_rows

    def build(self, title, headings, rows):
        headings = list(headings)
        if self.ragged_rows == RaggedRowPolicy.PAD:
            rows = [self.fit_row(row, len(headings)) for row in rows]
        return Sheet(truncate_title(title), headings, rows)

    @staticmethod
    def fit_row(row, width, filler=''):
        """Pads a short row with `filler` and cuts a long one to `width`."""
        row = list(row)
        if len(row) < width:
            row.extend([filler] * (width - len(row)))
        return row[:width]
