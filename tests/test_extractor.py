"""
Tests for PDF text extraction.
"""

import fitz
import pytest

from resume_reviewer.errors import ExtractionFailure
from resume_reviewer.extractor import extract_text


class TestExtractText:

    def test_single_page(self, make_pdf):
        text = extract_text(make_pdf("Jane Doe - Backend Engineer"))

        assert "Jane Doe - Backend Engineer" in text

    def test_pages_are_concatenated_in_order(self, make_pdf):
        text = extract_text(make_pdf("Experience section", "Education section"))

        assert text.index("Experience section") < text.index("Education section")

    def test_blank_pdf_yields_empty_text(self, make_pdf, caplog):
        text = extract_text(make_pdf(""))

        assert text == ""
        assert "no extractable text" in caplog.text

    @pytest.mark.parametrize("data", [b"", b"definitely not a pdf"])
    def test_corrupt_input(self, data):
        with pytest.raises(ExtractionFailure):
            extract_text(data)

    def test_password_protected(self):
        doc = fitz.open()
        doc.new_page().insert_text((72, 72), "secret resume")
        data = doc.tobytes(
            encryption=fitz.PDF_ENCRYPT_AES_256,
            owner_pw="owner",
            user_pw="user",
        )
        doc.close()

        with pytest.raises(ExtractionFailure):
            extract_text(data)
