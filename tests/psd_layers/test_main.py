import logging

import pytest
from PIL import Image

from psd_layers.__main__ import main

from .utils import group_begin, group_end, psd, rgb_layer

logger = logging.getLogger(__name__)


@pytest.fixture
def filename(tmp_path) -> str:
    layers = [
        rgb_layer("Background", (0, 0, 2, 2), [b"\x01" * 4] * 3),
        group_end(),
        rgb_layer("Leaf", (0, 0, 1, 1), [b"\x02"] * 3, alpha=b"\xff"),
        group_begin("Folder"),
    ]
    path = tmp_path / "test.psd"
    path.write_bytes(psd(2, 2, layers))
    return str(path)


def test_show(filename: str, capsys) -> None:
    assert main(["show", filename]) is None
    out = capsys.readouterr().out
    assert "[0] Folder/Leaf" in out
    assert "[1] Background" in out


def test_debug(filename: str, capsys) -> None:
    assert main(["--verbose", "debug", filename]) is None
    assert "Leaf" in capsys.readouterr().out


@pytest.mark.parametrize(
    "suffix, expected",
    [
        ("", (2, 2, 2, 255)),
        ("[0]", (2, 2, 2, 255)),
        ("[1]", (1, 1, 1, 0)),
    ],
)
def test_export(filename: str, tmp_path, suffix: str, expected) -> None:
    output = str(tmp_path / "output.png")
    assert main(["export", filename + suffix, output]) is None
    with Image.open(output) as image:
        assert image.size == (2, 2)
        assert image.getpixel((0, 0)) == expected


def test_export_bad_index(filename: str, tmp_path) -> None:
    assert main(["export", filename + "[5]", str(tmp_path / "out.png")]) == 1


def test_unsupported_file(tmp_path) -> None:
    path = tmp_path / "bad.psd"
    path.write_bytes(psd(2, 2, depth=16))
    assert main(["show", str(path)]) == 1


@pytest.mark.parametrize("argv", [["-h"], ["--version"], []])
def test_exit(argv) -> None:
    with pytest.raises(SystemExit):
        main(argv)
