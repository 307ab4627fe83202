import subprocess

import pytest

from app.backend import picker as picker_module
from app.backend.picker import CommandColorPicker, PickerResult, parse_picker_output
from modules.utils.exceptions import SamplingFailedException
from schemas.color_state import Color


def _completed(stdout="", returncode=0, stderr=""):
    return subprocess.CompletedProcess(args=["color-picker"], returncode=returncode, stdout=stdout, stderr=stderr)


def test_parse_single_foreground_sample():
    result = parse_picker_output("Foreground: RGB(255, 0, 128) | HEX: #FF0080\n")
    assert result == PickerResult(foreground=Color(255, 0, 128), background=None, continue_mode=False)
    assert not result.cancelled


def test_parse_both_samples_means_continue_mode():
    output = "Foreground: RGB(0, 0, 0) | HEX: #000000\nBackground: RGB(255, 255, 255) | HEX: #FFFFFF\n"
    result = parse_picker_output(output)
    assert result.foreground == Color(0, 0, 0)
    assert result.background == Color(255, 255, 255)
    assert result.continue_mode


def test_parse_ignores_unrelated_lines():
    result = parse_picker_output("Loaded 3 screens\nBackground: RGB(1, 2, 3)\n")
    assert result.foreground is None
    assert result.background == Color(1, 2, 3)


def test_parse_empty_output_is_a_cancellation():
    assert parse_picker_output("").cancelled


def test_parse_rejects_inconsistent_hex():
    with pytest.raises(SamplingFailedException):
        parse_picker_output("Foreground: RGB(255, 0, 128) | HEX: #000000")


def test_parse_rejects_out_of_range_channel():
    with pytest.raises(SamplingFailedException):
        parse_picker_output("Foreground: RGB(300, 0, 0)")


def test_build_args_adds_bg_flag():
    picker = CommandColorPicker("color-picker")
    assert picker.build_args(True) == ["color-picker"]
    assert picker.build_args(False) == ["color-picker", "--bg"]


def test_run_parses_subprocess_output(monkeypatch):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(args)
        return _completed("Background: RGB(10, 20, 30) | HEX: #0A141E\n")

    monkeypatch.setattr(picker_module.subprocess, "run", fake_run)
    result = CommandColorPicker(["color-picker", "--verbose"]).run(fg=False)

    assert calls == [["color-picker", "--verbose", "--bg"]]
    assert result.background == Color(10, 20, 30)


def test_run_treats_exit_status_one_without_output_as_cancel(monkeypatch):
    monkeypatch.setattr(picker_module.subprocess, "run", lambda args, **kwargs: _completed("", returncode=1))
    assert CommandColorPicker("color-picker").run(fg=True).cancelled


def test_run_raises_on_unexpected_exit_status(monkeypatch):
    monkeypatch.setattr(
        picker_module.subprocess, "run", lambda args, **kwargs: _completed("", returncode=2, stderr="boom")
    )
    with pytest.raises(SamplingFailedException):
        CommandColorPicker("color-picker").run(fg=True)


def test_run_raises_when_executable_is_missing(monkeypatch):
    def fake_run(args, **kwargs):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(picker_module.subprocess, "run", fake_run)
    with pytest.raises(SamplingFailedException):
        CommandColorPicker("missing-picker").run(fg=True)


def test_is_available_checks_path(monkeypatch):
    monkeypatch.setattr(picker_module.shutil, "which", lambda name: None)
    assert not CommandColorPicker("color-picker").is_available()
    monkeypatch.setattr(picker_module.shutil, "which", lambda name: "/usr/bin/" + name)
    assert CommandColorPicker("color-picker").is_available()
