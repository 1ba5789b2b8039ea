from pathlib import Path

import pytest
from PIL import Image

from battherm.display import Display, FramebufferDisplay, MockDisplay


@pytest.fixture
def fb(tmp_path: Path) -> tuple[Path, Path]:
    sysfs = tmp_path / "graphics"
    info = sysfs / "fb1"
    info.mkdir(parents=True)
    (info / "virtual_size").write_text("4,2\n")
    (info / "bits_per_pixel").write_text("32\n")
    device = tmp_path / "fb1"
    device.write_bytes(b"")
    return device, sysfs


def test_reads_geometry_from_sysfs(fb: tuple[Path, Path]) -> None:
    device, sysfs = fb
    display = FramebufferDisplay(device, sysfs)
    assert not display.simulate
    assert display.get_dimensions() == (4, 2)


def test_display_image_writes_bgra(fb: tuple[Path, Path], tmp_path: Path) -> None:
    device, sysfs = fb
    png = tmp_path / "red.png"
    Image.new("RGB", (8, 8), (255, 0, 0)).save(png)

    display = FramebufferDisplay(device, sysfs)
    display.display_image(png)

    data = device.read_bytes()
    assert len(data) == 4 * 2 * 4
    assert data[:4] == bytes([0, 0, 255, 255])
    assert display.get_last_displayed_image() == png


def test_clear_writes_black(fb: tuple[Path, Path]) -> None:
    device, sysfs = fb
    device.write_bytes(b"\xff" * 32)
    FramebufferDisplay(device, sysfs).clear()
    assert device.read_bytes() == bytes(32)


def test_missing_framebuffer_falls_back_to_simulation(tmp_path: Path) -> None:
    display = FramebufferDisplay(tmp_path / "fb7", tmp_path, size=(200, 100))
    assert display.simulate
    assert display.get_dimensions() == (200, 100)

    display.display_image(tmp_path / "frame.png")
    display.clear()
    assert display.get_last_displayed_image() == tmp_path / "frame.png"


def test_unsupported_depth_falls_back_to_simulation(fb: tuple[Path, Path]) -> None:
    device, sysfs = fb
    (sysfs / "fb1" / "bits_per_pixel").write_text("16\n")
    assert FramebufferDisplay(device, sysfs).simulate


def test_displays_satisfy_protocol() -> None:
    assert isinstance(MockDisplay(), Display)
    assert isinstance(FramebufferDisplay(simulate=True), Display)


def test_mock_display_records_calls() -> None:
    mock = MockDisplay(100, 50)
    mock.display_image(Path("a.png"))
    mock.clear()
    assert mock.display_calls == [Path("a.png")]
    assert mock.clear_calls == 1
    mock.reset_call_history()
    assert mock.display_calls == []
    assert mock.get_dimensions() == (100, 50)
