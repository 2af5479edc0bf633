import csv
import io
import re

import openpyxl
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

INVALID_TITLE_CHARS = re.compile(r'[\\*?:/\[\]]')
SCALAR_TYPES = (int, float, bool)


def cell_value(value):
    """Cells take scalars and datetimes; anything else is written as text without control characters."""
    if value is None or isinstance(value, SCALAR_TYPES):
        return value
    if hasattr(value, 'strftime'):
        return value
    if isinstance(value, (list, tuple, set)):
        value = ', '.join(str(v) for v in value)
    return ILLEGAL_CHARACTERS_RE.sub('', str(value))


class ExportWriter:
    """Serializes export sheets to XLSX or CSV streams."""
    XLSX_MIMETYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    CSV_MIMETYPE = 'text/csv'

    @staticmethod
    def apply_header_style(ws, row=1):
        for cell in ws[row]:
            cell.font = Font(bold=True)
            cell.alignment = Alignment(vertical='top')

    @staticmethod
    def auto_fit_columns(ws, min_width=12, max_width=50):
        for column in ws.columns:
            max_length = 0
            column_letter = get_column_letter(column[0].column)
            for cell in column:
                if cell.value is None or cell.value == '':
                    continue
                longest_line = max(len(line) for line in str(cell.value).split('\n'))
                max_length = max(max_length, longest_line)
            ws.column_dimensions[column_letter].width = min(max(max_length + 2, min_width), max_width)

    @staticmethod
    def tab_name(title):
        """Worksheet names cannot contain []:*?/\\ and cannot be empty."""
        name = INVALID_TITLE_CHARS.sub('-', ILLEGAL_CHARACTERS_RE.sub('', title or '')).strip()
        return name or 'Sheet'

    @staticmethod
    def write_sheet(ws, sheet):
        ws.title = ExportWriter.tab_name(sheet.title)
        ws.append([cell_value(v) for v in sheet.headings])
        for row in sheet.rows:
            ws.append([cell_value(v) for v in row])
        ExportWriter.apply_header_style(ws)
        ExportWriter.auto_fit_columns(ws)

    @staticmethod
    def to_xlsx(sheets):
        wb = openpyxl.Workbook()
        default_ws = wb.active
        for i, sheet in enumerate(sheets):
            ws = default_ws if i == 0 else wb.create_sheet()
            ExportWriter.write_sheet(ws, sheet)

        output = io.BytesIO()
        wb.save(output)
        output.seek(0)
        return output

    @staticmethod
    def to_csv(sheets):
        """
        A single sheet is written as heading row plus data rows. Several
        sheets are written one after another, each introduced by its title
        and separated by a blank line.
        """
        text = io.StringIO()
        writer = csv.writer(text, lineterminator='\n')
        multi = len(sheets) > 1
        for i, sheet in enumerate(sheets):
            if multi:
                if i:
                    writer.writerow([])
                writer.writerow([sheet.title])
            writer.writerow([cell_value(v) for v in sheet.headings])
            writer.writerows([cell_value(v) for v in row] for row in sheet.rows)

        output = io.BytesIO(text.getvalue().encode('utf-8-sig'))
        output.seek(0)
        return output
