"""Pytest configuration and fixtures for test suite.

Shared fixtures:
- settings isolation (EXCEL_IMPORT_* variables never leak between tests)
- the contacts example table
- a factory that writes real .xlsx workbooks with openpyxl
"""
import os
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence

import pytest
from openpyxl import Workbook

from excel_toolkit.config import ImporterSettings, get_settings


@pytest.fixture(autouse=True)
def isolate_settings(monkeypatch):
    """Drop cached settings and importer env variables around every test."""
    for key in list(os.environ):
        if key.upper().startswith("EXCEL_IMPORT_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> ImporterSettings:
    """Default settings that leave logging configuration alone."""
    return ImporterSettings(configure_logging=False)


@pytest.fixture
def contact_rows() -> List[List[Any]]:
    """Example contacts table: header plus four data rows."""
    return [
        ["ID", "First Name", "Last Name", "Phone"],
        [1001, "John", "Doe", "(555) 123-4567"],
        [1002, "Jane", "Smith", "(555) 987-6543"],
        [1003, "Alice", "Johnson", "(555) 555-1212"],
        [1004, "Bob", "Brown", "(555) 222-3333"],
    ]


@pytest.fixture
def build_workbook(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing rows to the first worksheet of a new .xlsx file."""
    def _build(
        rows: Sequence[Sequence[Any]],
        name: str = "contacts.xlsx",
        extra_sheets: Optional[dict] = None
    ) -> Path:
        wb = Workbook()
        ws = wb.active
        ws.title = "Contacts"
        for row in rows:
            ws.append(list(row))
        for title, sheet_rows in (extra_sheets or {}).items():
            extra = wb.create_sheet(title)
            for row in sheet_rows:
                extra.append(list(row))
        file_path = tmp_path / name
        wb.save(file_path)
        wb.close()
        return file_path
    return _build
