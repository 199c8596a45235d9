import base64
from datetime import date, datetime

import pytest

from contract_generator import utils
from contract_generator.exceptions import InvalidSignatureError
from contract_generator.storage.local import LocalBlobStore
from contract_generator.tests.factories import (
    CONTRACT_TEXT_FIELDS,
    make_signature_png,
    make_template,
)
from contract_generator.utils.date_utils import add_years, format_spanish_date
from contract_generator.utils.image_utils import decode_data_url
from contract_generator.utils.pdf_utils import list_form_fields, pdf_page_count


class TestDecodeDataUrl:
    def test_data_url(self):
        png = make_signature_png()
        value = "data:image/png;base64," + base64.b64encode(png).decode()
        assert decode_data_url(value) == png

    def test_bare_base64(self):
        assert decode_data_url(base64.b64encode(b"firma").decode()) == b"firma"

    def test_missing_padding_and_line_breaks(self):
        encoded = base64.b64encode(b"firma!").decode().rstrip("=")
        assert decode_data_url(encoded[:4] + "\n" + encoded[4:]) == b"firma!"

    @pytest.mark.parametrize("value", ["", "   ", "data:image/png;base64,", "not*base64"])
    def test_invalid(self, value):
        with pytest.raises(InvalidSignatureError):
            decode_data_url(value)


class TestDates:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (date(2026, 10, 19), "19/10/2026"),
            (datetime(2005, 5, 15, 8, 0), "15/05/2005"),
            ("2005-05-15", "15/05/2005"),
            ("2005-05-15T00:00:00Z", "15/05/2005"),
            (None, ""),
            ("15 de mayo", "15 de mayo"),
        ],
    )
    def test_format_spanish_date(self, value, expected):
        assert format_spanish_date(value) == expected

    def test_add_years(self):
        assert add_years(date(2026, 10, 19), 2) == date(2028, 10, 19)

    def test_add_years_from_leap_day(self):
        assert add_years(date(2024, 2, 29), 2) == date(2026, 2, 28)


class TestExports:
    def test_package_exports(self):
        assert sorted(utils.__all__) == [
            "add_years",
            "decode_data_url",
            "format_spanish_date",
            "list_form_fields",
            "pdf_page_count",
        ]


class TestPdf:
    def test_page_count(self, tmp_path):
        pdf = make_template(pages=2)
        path = tmp_path / "template.pdf"
        path.write_bytes(pdf)

        assert pdf_page_count(pdf) == 2
        assert pdf_page_count(path) == 2

    def test_list_form_fields(self):
        fields = list_form_fields(make_template(pages=2, fields=CONTRACT_TEXT_FIELDS))

        assert set(fields) == {name for name, *_ in CONTRACT_TEXT_FIELDS}
        assert fields["dni"] == [{"page": 1, "x": 72, "y": 670, "width": 150, "height": 20}]

    def test_list_form_fields_without_form(self):
        assert list_form_fields(make_template()) == {}


class TestLocalBlobStore:
    def test_put_and_get(self, tmp_path):
        store = LocalBlobStore(tmp_path)

        url = store.put("players/p1/documents/contract.pdf", b"%PDF-1.4")

        assert url.startswith("file://")
        assert (tmp_path / "players/p1/documents/contract.pdf").read_bytes() == b"%PDF-1.4"
        assert store.get("players/p1/documents/contract.pdf") == b"%PDF-1.4"

    def test_missing_object(self, tmp_path):
        assert LocalBlobStore(tmp_path).get("templates/contract_adult.pdf") is None

    def test_key_cannot_escape_root(self, tmp_path):
        store = LocalBlobStore(tmp_path / "storage")
        with pytest.raises(ValueError):
            store.put("../outside.pdf", b"data")
