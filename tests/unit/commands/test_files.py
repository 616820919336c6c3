"""Unit tests for DOWNLOAD, KILL, RUN and EOP."""

import pytest

from pytspl.commands.files import Download, DownloadStorage, Eop, Kill, Run
from pytspl.exceptions import ValidationError

# --- DOWNLOAD ---


def test_download_reference_bytes() -> None:
    cmd = Download().with_name("IMAGE1").with_data(bytes([0x01, 0x02, 0x03]))
    assert cmd.render() == b'DOWNLOAD "IMAGE1",3,\x01\x02\x03\r\n'


@pytest.mark.parametrize(
    "storage, prefix",
    [
        (DownloadStorage.FLASH, b"DOWNLOAD F,"),
        (DownloadStorage.EXPANSION_MODULE, b"DOWNLOAD E,"),
        (DownloadStorage.DRAM, b"DOWNLOAD "),
    ],
)
def test_download_storage_selector(storage: DownloadStorage, prefix: bytes) -> None:
    cmd = Download(name="A.BAS", data=b"xy").with_storage(storage)
    assert cmd.render() == prefix + b'"A.BAS",2,xy\r\n'


def test_download_dram_matches_unset_storage() -> None:
    base = Download(name="X", data=b"\x00")
    assert base.with_storage(DownloadStorage.DRAM).render() == base.render()


def test_download_length_counts_bytes_not_characters() -> None:
    payload = "Ä".encode("utf-8") * 5
    data = Download(name="T", data=payload).render()
    assert data == b'DOWNLOAD "T",10,' + payload + b"\r\n"


def test_download_payload_not_escaped() -> None:
    payload = b'",\r\n'
    assert Download(name="T", data=payload).render() == b'DOWNLOAD "T",4,",\r\n\r\n'


def test_download_empty_payload_allowed() -> None:
    assert Download(name="T", data=b"").render() == b'DOWNLOAD "T",0,\r\n'


def test_download_requires_name_and_data() -> None:
    with pytest.raises(ValidationError, match="name, data"):
        Download().render()
    with pytest.raises(ValidationError, match="name"):
        Download(name="", data=b"1").render()


def test_download_rejects_unknown_storage() -> None:
    with pytest.raises(ValidationError, match=r'storage must be one of \["",F,E\]'):
        Download(name="T", data=b"1", storage="X").render()  # type: ignore[arg-type]


def test_download_accepts_storage_token_string() -> None:
    cmd = Download(name="T", data=b"1", storage="F")  # type: ignore[arg-type]
    assert cmd.render() == b'DOWNLOAD F,"T",1,1\r\n'


# --- KILL / RUN / EOP ---


def test_kill() -> None:
    assert Kill().with_name("IMAGE1").render() == b'KILL "IMAGE1"\r\n'
    assert Kill(name="*", storage=DownloadStorage.FLASH).render() == b'KILL F,"*"\r\n'


def test_run() -> None:
    assert Run().with_name("DEMO.BAS").render() == b'RUN "DEMO.BAS"\r\n'


def test_eop() -> None:
    assert Eop().render() == b"EOP\r\n"


@pytest.mark.parametrize("cmd", [Download(name=5, data=b""), Kill(name=5), Run(name=b"A")])  # type: ignore[arg-type]
def test_non_string_name_is_a_validation_error(cmd) -> None:
    with pytest.raises(ValidationError, match="name must be a string") as exc_info:
        cmd.render()
    assert exc_info.value.field == "name"
