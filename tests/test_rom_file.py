import pytest
from gbheader.rom_file import load_file, read_file
from gbheader.errors import IoError, FormatError


def test_load_file(tmp_path):
    image = bytearray(0x8000)
    image[0x134:0x13A] = b"TETRIS"
    filename = tmp_path / "tetris.gb"
    filename.write_bytes(image)
    header = load_file(str(filename))
    assert header.display_title == "TETRIS"
    assert len(header.full_image) == 0x8000


def test_missing_file(tmp_path):
    filename = str(tmp_path / "missing.gb")
    with pytest.raises(IoError) as excinfo:
        read_file(filename)
    assert excinfo.value.filename == filename
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_directory(tmp_path):
    with pytest.raises(IoError):
        load_file(str(tmp_path))


def test_small_file(tmp_path):
    filename = tmp_path / "small.gb"
    filename.write_bytes(b"\x00" * 10)
    with pytest.raises(FormatError):
        load_file(str(filename))
