"""End-to-end import tests against real .xlsx workbooks written with openpyxl."""
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import pytest
from pydantic import BaseModel, Field

from excel_toolkit import (
    ExcelImporter,
    HeaderNotFoundError,
    ImporterSettings,
    InvalidHeaderIndexError,
    SizeLimitExceededError,
    SourceNotFoundError,
    UnsupportedFormatError,
    import_records,
)


class Contact(BaseModel):
    ID: str = ""
    FirstName: str = Field(default="", alias="First Name")
    LastName: str = Field(default="", alias="Last Name")
    Phone: str = ""
    Email: Optional[str] = None


@dataclass
class PhoneEntry:
    contact_id: str = field(default="", metadata={"alias": "ID"})
    phone: str = ""


@pytest.fixture
def importer(settings: ImporterSettings) -> ExcelImporter:
    return ExcelImporter(settings=settings)


@pytest.fixture
def report_workbook(build_workbook) -> Path:
    """Workbook with a title block; the header sits on the third row."""
    return build_workbook([
        ["Contact export", None, None, None],
        [None, None, None, None],
        ["  id ", "First Name", "Last Name", "Phone"],
        [1001, "  John ", "Doe", "(555) 123-4567"],
        [None, "   ", None, None],
        [1002, "Jane", "Smith", "(555) 987-6543"],
    ], name="report.xlsx")


class TestFirstRowImport:

    def test_example_table(self, importer: ExcelImporter, build_workbook, contact_rows):
        """Four data rows under a first-row header produce four records."""
        workbook = build_workbook(contact_rows)

        records = importer.import_records(workbook, Contact)

        assert len(records) == 4
        first = records[0]
        assert first.ID == "1001"
        assert first.FirstName == "John"
        assert first.LastName == "Doe"
        assert first.Phone == "(555) 123-4567"
        assert first.Email is None
        assert [r.ID for r in records] == ["1001", "1002", "1003", "1004"]

    def test_module_level_import(self, build_workbook, contact_rows):
        workbook = build_workbook(contact_rows)
        records = import_records(workbook, Contact)
        assert [r.LastName for r in records] == ["Doe", "Smith", "Johnson", "Brown"]

    def test_dataclass_records(self, importer: ExcelImporter, build_workbook, contact_rows):
        workbook = build_workbook(contact_rows)
        entries = importer.import_records(workbook, PhoneEntry)
        assert entries[1] == PhoneEntry(contact_id="1002", phone="(555) 987-6543")

    def test_blank_rows_skipped(self, importer: ExcelImporter, build_workbook, contact_rows):
        rows = contact_rows[:2] + [[None, "  ", None, None]] + contact_rows[2:]
        workbook = build_workbook(rows)

        imported = importer.import_rows(workbook, Contact)

        assert len(imported) == 4
        assert [row.row_index for row in imported] == [1, 3, 4, 5]

    def test_only_first_worksheet_is_read(self, importer: ExcelImporter, build_workbook, contact_rows):
        workbook = build_workbook(
            contact_rows[:2],
            extra_sheets={"Archive": contact_rows},
        )
        records = importer.import_records(workbook, Contact)
        assert [r.ID for r in records] == ["1001"]

    def test_header_only_sheet(self, importer: ExcelImporter, build_workbook, contact_rows):
        workbook = build_workbook(contact_rows[:1])
        assert importer.import_records(workbook, Contact) == []


class TestExplicitHeaderRowImport:

    def test_third_row_header(self, importer: ExcelImporter, report_workbook: Path):
        records = importer.import_records(report_workbook, Contact, header_row=2)

        assert [r.ID for r in records] == ["1001", "1002"]
        assert records[0].FirstName == "John"

    def test_zero_rejected(self, importer: ExcelImporter, report_workbook: Path):
        with pytest.raises(InvalidHeaderIndexError):
            importer.import_records(report_workbook, Contact, header_row=0)


class TestColumnAHeaderImport:

    def test_finds_header_by_label(self, importer: ExcelImporter, report_workbook: Path):
        imported = importer.import_rows(report_workbook, Contact, column_a_header="ID")

        assert [row.row_index for row in imported] == [3, 5]
        assert imported[1].record.LastName == "Smith"

    def test_label_not_found(self, importer: ExcelImporter, report_workbook: Path):
        with pytest.raises(HeaderNotFoundError):
            importer.import_records(report_workbook, Contact, column_a_header="Email")


@dataclass
class TypedCells:
    A: str = ""
    B: str = ""
    C: str = ""
    D: str = ""
    E: str = ""


class TestNativeCellValues:
    """Numbers, booleans and dates stored natively in the workbook become text."""

    def test_cell_types_rendered_as_text(self, importer: ExcelImporter, build_workbook):
        workbook = build_workbook([
            ["A", "B", "C", "D", "E"],
            [True, datetime(2024, 1, 2), 1.5, 1001.0, datetime(2024, 1, 2, 12, 0)],
            [False, date(2023, 12, 31), -0.25, 7, "text"],
        ])

        records = importer.import_records(workbook, TypedCells)

        assert records == [
            TypedCells(A="TRUE", B="2024-01-02", C="1.5", D="1001", E="2024-01-02 12:00:00"),
            TypedCells(A="FALSE", B="2023-12-31", C="-0.25", D="7", E="text"),
        ]


class TestSourceFailures:

    def test_missing_file(self, importer: ExcelImporter, tmp_path: Path):
        with pytest.raises(SourceNotFoundError):
            importer.import_records(tmp_path / "nope.xlsx", Contact)

    def test_wrong_extension(self, importer: ExcelImporter, tmp_path: Path):
        file_path = tmp_path / "contacts.csv"
        file_path.write_text("ID,Phone\n1,555\n")
        with pytest.raises(UnsupportedFormatError):
            importer.import_records(file_path, Contact)

    def test_corrupt_workbook(self, importer: ExcelImporter, tmp_path: Path):
        file_path = tmp_path / "corrupt.xlsx"
        file_path.write_bytes(b"\x00\x01 definitely not a workbook")
        with pytest.raises(UnsupportedFormatError):
            importer.import_records(file_path, Contact)

    def test_damaged_zip_directory(self, importer: ExcelImporter, build_workbook, contact_rows):
        workbook = build_workbook(contact_rows)
        workbook.write_bytes(workbook.read_bytes().replace(b"PK\x01\x02", b"XXXX"))
        with pytest.raises(UnsupportedFormatError):
            importer.import_records(workbook, Contact)

    def test_size_limit_from_environment(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("EXCEL_IMPORT_MAX_FILE_SIZE_MB", "1")
        monkeypatch.setenv("EXCEL_IMPORT_CONFIGURE_LOGGING", "false")
        file_path = tmp_path / "huge.xls"
        file_path.write_bytes(b"\0" * (1024 * 1024 + 1))

        with pytest.raises(SizeLimitExceededError):
            ExcelImporter().import_records(file_path, Contact)


class TestConcurrentImports:

    def test_parallel_calls_are_independent(self, importer: ExcelImporter, build_workbook, contact_rows):
        workbooks = [
            build_workbook(contact_rows[: n + 1], name=f"contacts_{n}.xlsx")
            for n in range(1, 5)
        ]

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda wb: importer.import_records(wb, Contact), workbooks))

        assert [len(records) for records in results] == [1, 2, 3, 4]
