from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar, Final

from PIL import Image

from battherm.display.protocols import DisplayDriver

logger: Final = logging.getLogger(__name__)


class FramebufferDisplay(DisplayDriver):
    """Linux framebuffer display handler (e.g. a small SPI/HDMI panel on /dev/fb1).

    Geometry and pixel depth are read from ``/sys/class/graphics/<fb>``.
    When the device is missing or uses an unsupported depth the handler
    degrades to simulation mode and only logs what it would show.
    """

    RAW_MODES: ClassVar[dict[int, tuple[str, str]]] = {
        32: ("RGBA", "BGRA"),
        24: ("RGB", "BGR"),
    }

    def __init__(
        self,
        device: Path | str = "/dev/fb0",
        sysfs_root: Path | str = "/sys/class/graphics",
        simulate: bool = False,
        size: tuple[int, int] = (450, 450),
    ) -> None:
        """Initialize the display handler.

        Args:
            device: Framebuffer device node
            sysfs_root: Directory holding framebuffer sysfs entries
            simulate: If True, run in simulation mode without hardware
            size: Dimensions to report in simulation mode
        """
        self.device = Path(device)
        self.simulate = simulate
        self.width, self.height = size
        self.bits_per_pixel = 32
        self._last_displayed_image: Path | None = None

        if not simulate:
            info = Path(sysfs_root) / self.device.name
            try:
                w, h = (info / "virtual_size").read_text().strip().split(",")
                self.width, self.height = int(w), int(h)
                self.bits_per_pixel = int((info / "bits_per_pixel").read_text().strip())
            except (OSError, ValueError) as exc:
                logger.warning("Framebuffer %s not usable (%s), running in simulation mode", self.device, exc)
                self.simulate = True
            else:
                if self.bits_per_pixel not in self.RAW_MODES:
                    logger.warning(
                        "Unsupported framebuffer depth %d bpp, running in simulation mode",
                        self.bits_per_pixel,
                    )
                    self.simulate = True

    def display_image(self, image_path: Path) -> None:
        """Scale the image to the panel and write it to the framebuffer."""
        self._last_displayed_image = image_path

        if self.simulate:
            logger.debug("[SIM] Would display %s on %s", image_path, self.device)
            return

        mode, rawmode = self.RAW_MODES[self.bits_per_pixel]
        with Image.open(image_path) as img:
            frame = img.convert(mode).resize((self.width, self.height))
        with open(self.device, "wb") as fb:
            fb.write(frame.tobytes("raw", rawmode))

    def get_dimensions(self) -> tuple[int, int]:
        return (self.width, self.height)

    def clear(self) -> None:
        """Clear the display to black."""
        if self.simulate:
            logger.debug("[SIM] Would clear %s", self.device)
            return
        with open(self.device, "wb") as fb:
            fb.write(bytes(self.width * self.height * self.bits_per_pixel // 8))

    def get_last_displayed_image(self) -> Path | None:
        """Return the path to the last displayed image (for testing)."""
        return self._last_displayed_image
