"""Tests for the pandas-backed Excel grid reader.

Engine selection and decode errors are tested with pd.ExcelFile patched;
real workbook decoding is covered by the integration tests.
"""
from pathlib import Path
from unittest.mock import MagicMock, patch

import pandas as pd
import pytest

from excel_toolkit.errors.exceptions import UnsupportedFormatError
from excel_toolkit.readers.base_reader import GridReader
from excel_toolkit.readers.excel_reader import ExcelGridReader


@pytest.fixture
def reader() -> ExcelGridReader:
    return ExcelGridReader()


def _mock_workbook(frame: pd.DataFrame, sheet_names=("Sheet1",)) -> MagicMock:
    workbook = MagicMock()
    workbook.sheet_names = list(sheet_names)
    workbook.parse.return_value = frame
    excel_file = MagicMock()
    excel_file.return_value.__enter__.return_value = workbook
    return excel_file


class TestExcelGridReader:
    
    def test_is_a_grid_reader(self, reader: ExcelGridReader):
        assert isinstance(reader, GridReader)
        assert reader.get_reader_name() == "excel"
    
    @pytest.mark.parametrize("name,engine", [
        ("data.xlsx", "openpyxl"),
        ("data.XLSM", "openpyxl"),
        ("legacy.xls", "xlrd"),
    ])
    def test_engine_chosen_by_extension(self, reader: ExcelGridReader, name: str, engine: str):
        excel_file = _mock_workbook(pd.DataFrame([["ID"]]))
        with patch("excel_toolkit.readers.excel_reader.pd.ExcelFile", excel_file):
            reader.read(Path(name))
        
        excel_file.assert_called_once_with(Path(name), engine=engine)
    
    def test_reads_first_sheet_as_text(self, reader: ExcelGridReader):
        frame = pd.DataFrame([["ID", "Name"], ["1001", float("nan")]])
        excel_file = _mock_workbook(frame, sheet_names=("Contacts", "Archive"))
        
        with patch("excel_toolkit.readers.excel_reader.pd.ExcelFile", excel_file):
            grid = reader.read(Path("contacts.xlsx"))
        
        workbook = excel_file.return_value.__enter__.return_value
        kwargs = workbook.parse.call_args.kwargs
        assert kwargs["sheet_name"] == "Contacts"
        assert kwargs["header"] is None
        assert kwargs["dtype"] is object
        assert grid.rows == [["ID", "Name"], ["1001", None]]
        assert grid.sheet_name == "Contacts"
    
    def test_workbook_without_sheets(self, reader: ExcelGridReader):
        excel_file = _mock_workbook(pd.DataFrame(), sheet_names=())
        with patch("excel_toolkit.readers.excel_reader.pd.ExcelFile", excel_file):
            with pytest.raises(UnsupportedFormatError) as exc_info:
                reader.read(Path("empty.xlsx"))
        assert "No sheets" in str(exc_info.value)
    
    def test_unknown_extension(self, reader: ExcelGridReader):
        with pytest.raises(UnsupportedFormatError):
            reader.read(Path("data.ods"))
    
    def test_corrupt_file_wrapped(self, reader: ExcelGridReader, tmp_path: Path):
        file_path = tmp_path / "broken.xlsx"
        file_path.write_bytes(b"this is not a zip container")
        
        with pytest.raises(UnsupportedFormatError) as exc_info:
            reader.read(file_path)
        
        assert exc_info.value.__cause__ is not None
        assert exc_info.value.details["engine"] == "openpyxl"
