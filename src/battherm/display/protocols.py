# src/battherm/display/protocols.py
from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class Display(Protocol):
    """Protocol defining the interface for display devices.

    Abstracts the hardware-specific details of the screen so the application
    can drive a framebuffer, a test double or anything else that can show a
    PNG.
    """

    def display_image(self, image_path: Path) -> None:
        """Display an image on the device.

        Args:
            image_path: Path to the image file
        """
        ...

    def get_dimensions(self) -> tuple[int, int]:
        """Return the width and height of the display in pixels."""
        ...

    def clear(self) -> None:
        """Clear the display to black."""
        ...


# Alias for the display protocol, for clearer DI naming
DisplayDriver = Display


class MockDisplay:
    """Mock implementation of Display for testing."""

    def __init__(self, width: int = 450, height: int = 450):
        self.width = width
        self.height = height
        self.display_calls: list[Path] = []
        self.clear_calls = 0

    def display_image(self, image_path: Path) -> None:
        """Record the display call without requiring hardware."""
        self.display_calls.append(image_path)

    def get_dimensions(self) -> tuple[int, int]:
        return (self.width, self.height)

    def clear(self) -> None:
        self.clear_calls += 1

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.display_calls = []
        self.clear_calls = 0
