"""Unit tests for BARCODE and QRCODE."""

import pytest

from pytspl.commands.codes import (
    Barcode,
    BarcodeType,
    HumanReadable,
    QrCode,
    QrEccLevel,
    QrMode,
    QrModel,
)
from pytspl.commands.text import Alignment
from pytspl.exceptions import ValidationError


@pytest.fixture
def barcode() -> Barcode:
    return (
        Barcode()
        .with_x(10)
        .with_y(10)
        .with_code_type(BarcodeType.CODE128)
        .with_height(100)
        .with_human_readable(HumanReadable.LEFT)
        .with_rotation(0)
        .with_narrow(2)
        .with_wide(2)
        .with_content("12345")
    )


@pytest.fixture
def qrcode() -> QrCode:
    return QrCode(
        x=10,
        y=10,
        ecc_level=QrEccLevel.H,
        cell_width=4,
        mode=QrMode.AUTO,
        rotation=0,
        content="ABC",
    )


class TestBarcode:
    def test_render(self, barcode: Barcode) -> None:
        assert barcode.render() == b'BARCODE 10,10,"128",100,1,0,2,2,"12345"\r\n'

    def test_alignment(self, barcode: Barcode) -> None:
        data = barcode.with_alignment(Alignment.CENTER).render()
        assert data == b'BARCODE 10,10,"128",100,1,0,2,2,2,"12345"\r\n'

    @pytest.mark.parametrize("code_type", list(BarcodeType))
    def test_every_symbology_is_quoted(self, barcode: Barcode, code_type: BarcodeType) -> None:
        data = barcode.with_code_type(code_type).render()
        assert f',"{code_type.value}",'.encode() in data

    def test_symbology_by_token(self, barcode: Barcode) -> None:
        data = barcode.with_code_type("EAN13").with_content("590123412345").render()  # type: ignore[arg-type]
        assert data.startswith(b'BARCODE 10,10,"EAN13",')

    def test_unknown_symbology(self, barcode: Barcode) -> None:
        with pytest.raises(ValidationError, match="code_type must be one of"):
            barcode.with_code_type("PDF417").render()  # type: ignore[arg-type]

    @pytest.mark.parametrize("field", ["height", "narrow", "wide"])
    def test_sizes_at_least_one(self, barcode: Barcode, field: str) -> None:
        with pytest.raises(ValidationError, match=f"{field} parameter must be at least 1"):
            getattr(barcode, f"with_{field}")(0).render()

    def test_human_readable_range(self, barcode: Barcode) -> None:
        with pytest.raises(ValidationError, match="human_readable"):
            barcode.with_human_readable(4).render()  # type: ignore[arg-type]

    def test_rotation(self, barcode: Barcode) -> None:
        assert b",1,90,2,2," in barcode.with_rotation(90).render()
        with pytest.raises(ValidationError, match=r"\[0,90,180,270\]"):
            barcode.with_rotation(45).render()


class TestQrCode:
    def test_render(self, qrcode: QrCode) -> None:
        assert qrcode.render() == b'QRCODE 10,10,H,4,A,0,"ABC"\r\n'

    def test_model_and_mask(self, qrcode: QrCode) -> None:
        data = qrcode.with_model(QrModel.M2).with_mask(7).render()
        assert data == b'QRCODE 10,10,H,4,A,0,M2,S7,"ABC"\r\n'

    def test_mask_without_model(self, qrcode: QrCode) -> None:
        assert qrcode.with_mask(0).render() == b'QRCODE 10,10,H,4,A,0,S0,"ABC"\r\n'

    def test_manual_mode(self, qrcode: QrCode) -> None:
        data = qrcode.with_mode(QrMode.MANUAL).with_ecc_level(QrEccLevel.L).render()
        assert data == b'QRCODE 10,10,L,4,M,0,"ABC"\r\n'

    @pytest.mark.parametrize("cell_width", [0, 11])
    def test_cell_width_range(self, qrcode: QrCode, cell_width: int) -> None:
        with pytest.raises(ValidationError, match="cell_width parameter must be between 1 and 10"):
            qrcode.with_cell_width(cell_width).render()

    @pytest.mark.parametrize("mask", [-1, 9])
    def test_mask_range(self, qrcode: QrCode, mask: int) -> None:
        with pytest.raises(ValidationError, match="mask"):
            qrcode.with_mask(mask).render()

    def test_invalid_ecc(self, qrcode: QrCode) -> None:
        with pytest.raises(ValidationError, match=r"ecc_level must be one of \[L,M,Q,H\]"):
            qrcode.with_ecc_level("X").render()  # type: ignore[arg-type]

    def test_content_encoding(self, qrcode: QrCode) -> None:
        data = qrcode.with_content("Grüße").render()
        assert data.endswith('"Grüße"\r\n'.encode("utf-8"))
