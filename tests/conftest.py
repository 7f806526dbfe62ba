"""Shared pytest fixtures for artwork_audit tests."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

from artwork_audit.controllers.artwork_controller import ArtworkController
from artwork_audit.models.config_model import AnalyzerConfig


def png_bytes(width: int, height: int, color: tuple = (200, 40, 40, 255)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGBA", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def write_png() -> Callable[..., Path]:
    """Write a solid-color PNG, creating parent directories."""

    def _write(path: Path, width: int = 10, height: int = 10) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(png_bytes(width, height))
        return path

    return _write


@pytest.fixture
def write_text() -> Callable[[Path, str], Path]:
    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def controller() -> ArtworkController:
    return ArtworkController(config=AnalyzerConfig(max_workers=4))


# ============================================================================
# Sample project
# ============================================================================


@pytest.fixture
def sample_project(tmp_path: Path, write_png, write_text) -> Path:
    """Small iOS-like project.

    Images:
        Images/icon.png (20x20), Images/icon@2x.png (40x40) - referenced from code
        Images/bg.png - never referenced
        Images/splash.png - referenced only in project.pbxproj, no @2x
        Images/button@2x~ipad.png (101x200) - referenced from a nib, no standard version
        Images/tab~iphone.png - referenced from code
    """
    root = tmp_path / "MyApp"
    images = root / "Images"
    write_png(images / "icon.png", 20, 20)
    write_png(images / "icon@2x.png", 40, 40)
    write_png(images / "bg.png", 8, 8)
    write_png(images / "splash.png", 32, 48)
    write_png(images / "button@2x~ipad.png", 101, 200)
    write_png(images / "tab~iphone.png", 12, 12)

    write_text(
        root / "Classes" / "RootViewController.m",
        '[UIImage imageNamed:@"icon"];\n[UIImage imageNamed:@"tab"];\n',
    )
    write_text(
        root / "Resources" / "MainView.xib",
        '<string key="NSResourceName">button~ipad.png</string>\n',
    )
    write_text(
        root / "MyApp.xcodeproj" / "project.pbxproj",
        "/* splash.png */ = {isa = PBXFileReference; path = splash.png; };\n"
        'name = "splash.png";\n',
    )
    write_text(root / "Resources" / "Empty.strings", "")
    return root
