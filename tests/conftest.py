from pathlib import Path

import fitz  # PyMuPDF
import pytest


def make_pdf(path: Path, page_count: int) -> Path:
    doc = fitz.open()
    for i in range(page_count):
        page = doc.new_page(width=200, height=100)
        page.insert_text((20, 50), f"Page {i + 1}")
    doc.save(path.as_posix())
    doc.close()
    return path


@pytest.fixture
def three_page_pdf(tmp_path: Path) -> Path:
    return make_pdf(tmp_path / "Report 2024.pdf", 3)
