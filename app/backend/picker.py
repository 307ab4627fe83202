from __future__ import annotations

import logging
import re
import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from modules.utils.exceptions import InvalidFormatException, SamplingFailedException
from schemas.color_state import Color, ColorRole

logger = logging.getLogger(__name__)

# One line per picked side, e.g. "Foreground: RGB(255, 0, 128) | HEX: #FF0080"
_SAMPLE_LINE = re.compile(
    r"^(?P<role>Foreground|Background):\s*RGB\((?P<r>\d{1,3}),\s*(?P<g>\d{1,3}),\s*(?P<b>\d{1,3})\)"
    r"(?:\s*\|\s*HEX:\s*(?P<hex>#[0-9A-Fa-f]{6}))?\s*$"
)


@dataclass(frozen=True)
class PickerResult:
    """What one run of the screen picker produced.

    A side is ``None`` when it was not sampled; both ``None`` means the user
    cancelled.
    """

    foreground: Optional[Color] = None
    background: Optional[Color] = None
    continue_mode: bool = False

    @property
    def cancelled(self) -> bool:
        return self.foreground is None and self.background is None


class ColorPicker(ABC):
    """Blocking screen colour picker. ``run`` is called off the GUI thread."""

    @abstractmethod
    def run(self, fg: bool) -> PickerResult:
        """Sample a colour for the foreground (``fg``) or background role."""


def parse_picker_output(output: str) -> PickerResult:
    samples = {}
    for line in output.splitlines():
        match = _SAMPLE_LINE.match(line.strip())
        if not match:
            continue
        try:
            color = Color(int(match["r"]), int(match["g"]), int(match["b"]))
        except InvalidFormatException as e:
            raise SamplingFailedException(f"Picker reported an invalid sample: {line.strip()!r}") from e
        if match["hex"] and Color.from_hex(match["hex"]) != color:
            raise SamplingFailedException(f"Picker reported inconsistent sample: {line.strip()!r}")
        samples[ColorRole(match["role"].lower())] = color

    foreground = samples.get(ColorRole.FOREGROUND)
    background = samples.get(ColorRole.BACKGROUND)
    return PickerResult(
        foreground=foreground,
        background=background,
        # The picker only reports both sides when it was toggled into continue mode.
        continue_mode=foreground is not None and background is not None,
    )


class CommandColorPicker(ColorPicker):
    """Runs the external ``color-picker`` executable and parses its output."""

    def __init__(self, command: Sequence[str] | str, timeout: Optional[float] = None):
        self.command: List[str] = [command] if isinstance(command, str) else list(command)
        self.timeout = timeout

    def is_available(self) -> bool:
        return bool(self.command) and shutil.which(self.command[0]) is not None

    def build_args(self, fg: bool) -> List[str]:
        args = list(self.command)
        if not fg:
            args.append("--bg")
        return args

    def run(self, fg: bool) -> PickerResult:
        args = self.build_args(fg)
        try:
            completed = subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise SamplingFailedException(f"Failed to run colour picker {args[0]!r}: {e}") from e

        result = parse_picker_output(completed.stdout or "")
        if result.cancelled:
            if completed.returncode not in (0, 1):
                stderr = (completed.stderr or "").strip()
                raise SamplingFailedException(
                    f"Colour picker exited with status {completed.returncode}: {stderr}"
                )
            logger.info("Colour picker closed without a selection")
        return result
