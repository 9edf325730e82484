"""Excel grid reader built on pandas.

Reads the first worksheet of .xlsx/.xlsm (openpyxl) and .xls (xlrd)
workbooks. Cached formula results are read; formulas are never
evaluated. Native cell values are converted to text by ``to_cell_text``.
"""
from pathlib import Path
from typing import Dict

import pandas as pd
import structlog

from excel_toolkit.errors.exceptions import ExcelImportError, UnsupportedFormatError
from excel_toolkit.models.grid import Grid
from excel_toolkit.readers.base_reader import GridReader

logger = structlog.get_logger(__name__)


class ExcelGridReader(GridReader):
    """Decodes the first worksheet of an Excel workbook into a Grid.
    
    Cells keep their native values (``dtype=object``) until the grid converts
    them to text; empty cells become absent (None). Literal texts such as
    "NA" or "null" are kept as written.
    """
    
    ENGINES: Dict[str, str] = {
        '.xlsx': 'openpyxl',
        '.xlsm': 'openpyxl',
        '.xls': 'xlrd',
    }
    
    def get_reader_name(self) -> str:
        """Return reader identifier."""
        return "excel"
    
    def read(self, path: Path) -> Grid:
        """Read the first worksheet of the workbook at path.
        
        Raises:
            UnsupportedFormatError: Unknown extension, no worksheets, or the
                container cannot be decoded
        """
        extension = path.suffix.lower()
        engine = self.ENGINES.get(extension)
        if engine is None:
            raise UnsupportedFormatError(
                f"No Excel engine for '{extension}' files",
                details={"source": str(path)}
            )
        
        log = logger.bind(source=str(path), engine=engine)
        
        try:
            with pd.ExcelFile(path, engine=engine) as workbook:
                if not workbook.sheet_names:
                    raise UnsupportedFormatError(
                        "No sheets found in Excel file",
                        details={"source": str(path)}
                    )
                
                sheet_name = workbook.sheet_names[0]
                df_raw = workbook.parse(
                    sheet_name=sheet_name,
                    header=None,
                    dtype=object,
                    keep_default_na=False,
                    na_values=[''],
                )
        except ExcelImportError:
            raise
        except Exception as e:
            log.warning("workbook_decode_failed", error=str(e))
            raise UnsupportedFormatError(
                f"Unable to read '{path.name}' as an Excel workbook: {e}",
                details={"source": str(path), "engine": engine}
            ) from e
        
        values = [
            [None if pd.isna(cell) else cell for cell in row]
            for row in df_raw.itertuples(index=False, name=None)
        ]
        grid = Grid.from_values(values, sheet_name=str(sheet_name), source=str(path))
        
        log.info(
            "worksheet_read",
            sheet_name=grid.sheet_name,
            row_count=len(grid),
            column_count=grid.width,
        )
        return grid
