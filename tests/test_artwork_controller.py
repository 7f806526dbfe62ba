"""End-to-end tests for artwork extraction over a real directory tree."""

from pathlib import Path

import pytest

from artwork_audit.controllers.artwork_controller import ArtworkController
from artwork_audit.errors import ArtworkProcessingError, ImageDecodingError, PreconditionError
from artwork_audit.models.config_model import AnalyzerConfig
from artwork_audit.models.image_model import ImageAsset
from artwork_audit.services.file_service import FileService


def names(images) -> list:
    return [image.name for image in images]


def test_sample_project_report(controller: ArtworkController, sample_project: Path) -> None:
    report = controller.extract_artwork(sample_project)

    assert names(report.all_images) == [
        "bg.png",
        "button@2x~ipad.png",
        "icon.png",
        "icon@2x.png",
        "splash.png",
        "tab~iphone.png",
    ]
    assert names(report.unreferenced_images) == ["bg.png"]
    assert names(report.manifest_only_images) == ["splash.png"]
    assert names(report.high_density_images) == ["button@2x~ipad.png", "icon@2x.png"]
    assert names(report.standard_missing_high_density) == ["bg.png", "splash.png", "tab~iphone.png"]
    assert names(report.high_density_missing_standard) == ["button@2x~ipad.png"]
    assert names(report.incorrect_device_suffix_images) == ["tab~iphone.png"]
    assert names(report.incorrectly_sized_high_density_images) == ["button@2x~ipad.png"]
    assert report.standard_platform_images == ()
    assert len(report.missing_standard_platform_filenames) == 17
    assert report.has_problems


def test_reference_map_points_at_real_files(controller: ArtworkController, sample_project: Path) -> None:
    report = controller.extract_artwork(sample_project)
    icon = ImageAsset((sample_project / "Images" / "icon.png").absolute())

    assert report.referencing_files[icon] == ((sample_project / "Classes" / "RootViewController.m").absolute(),)
    assert all(path.name != "Empty.strings" for files in report.referencing_files.values() for path in files)


def test_report_invariants(controller: ArtworkController, sample_project: Path) -> None:
    report = controller.extract_artwork(sample_project)
    all_images = set(report.all_images)

    referenced, unreferenced = set(report.referencing_files), set(report.unreferenced_images)
    assert referenced | unreferenced == all_images
    assert not referenced & unreferenced

    standard, high = set(report.standard_density_images), set(report.high_density_images)
    assert standard | high == all_images
    assert not standard & high
    assert set(report.standard_missing_high_density) <= standard
    assert set(report.high_density_missing_standard) <= high


def test_metrics_and_total_size(controller: ArtworkController, sample_project: Path) -> None:
    report = controller.extract_artwork(sample_project)

    assert set(report.metrics) == set(report.all_images)
    splash = next(image for image in report.all_images if image.name == "splash.png")
    assert (report.metrics[splash].width, report.metrics[splash].height) == (32, 48)
    assert report.total_size_bytes == sum(image.path.stat().st_size for image in report.all_images)


def test_scenario_matched_pair_and_unreferenced(tmp_path: Path, write_png, write_text) -> None:
    write_png(tmp_path / "icon.png", 10, 10)
    write_png(tmp_path / "icon@2x.png", 20, 20)
    write_png(tmp_path / "bg.png")
    write_text(tmp_path / "App.m", '@"icon"')

    report = ArtworkController().extract_artwork(tmp_path)

    assert names(report.unreferenced_images) == ["bg.png"]
    assert names(report.standard_missing_high_density) == ["bg.png"]
    assert report.high_density_missing_standard == ()


def test_scenario_missing_high_density(tmp_path: Path, write_png) -> None:
    write_png(tmp_path / "splash.png")
    report = ArtworkController().extract_artwork(tmp_path)
    assert names(report.standard_missing_high_density) == ["splash.png"]


def test_standard_platform_images_found(tmp_path: Path, write_png) -> None:
    write_png(tmp_path / "Icon.png", 57, 57)
    write_png(tmp_path / "Icon@2x.png", 114, 114)

    report = ArtworkController().extract_artwork(tmp_path)

    assert names(report.standard_platform_images) == ["Icon.png", "Icon@2x.png"]
    assert "Icon.png" not in report.missing_standard_platform_filenames
    assert "Default.png" in report.missing_standard_platform_filenames


def test_custom_config_suffixes_and_ignored_dirs(tmp_path: Path, write_png, write_text) -> None:
    write_png(tmp_path / "a.png")
    write_png(tmp_path / "Pods" / "vendor.png")
    write_text(tmp_path / "view.swift", '"a"')

    config = AnalyzerConfig(referencing_file_suffixes=frozenset({".swift"}), ignored_names=frozenset({"Pods"}))
    report = ArtworkController(config=config).extract_artwork(tmp_path)

    assert names(report.all_images) == ["a.png"]
    assert report.unreferenced_images == ()


@pytest.mark.parametrize("make_root", [lambda tmp: tmp / "missing", lambda tmp: tmp / "file.txt", lambda tmp: None])
def test_bad_root_fails_before_any_read(tmp_path: Path, make_root) -> None:
    (tmp_path / "file.txt").write_text("x")

    class ForbiddenFileService(FileService):
        def list_images(self, *args, **kwargs):
            raise AssertionError("must not be called")

        def list_referencing_files(self, *args, **kwargs):
            raise AssertionError("must not be called")

    controller = ArtworkController(_file_service=ForbiddenFileService())
    with pytest.raises(PreconditionError):
        controller.extract_artwork(make_root(tmp_path))


def test_corrupt_image_wraps_cause(tmp_path: Path, write_png) -> None:
    write_png(tmp_path / "good.png")
    (tmp_path / "broken.png").write_bytes(b"definitely not a png")

    with pytest.raises(ArtworkProcessingError) as excinfo:
        ArtworkController().extract_artwork(tmp_path)

    assert isinstance(excinfo.value.cause, ImageDecodingError)
    assert excinfo.value.__cause__ is excinfo.value.cause


def test_progress_callback_receives_every_image(controller: ArtworkController, sample_project: Path) -> None:
    seen = []
    controller.extract_artwork(sample_project, lambda image, files, processed, total: seen.append((image, total)))

    assert len(seen) == 6
    assert {total for _, total in seen} == {6}


def test_report_to_dict_is_json_friendly(controller: ArtworkController, sample_project: Path) -> None:
    data = controller.extract_artwork(sample_project).to_dict()

    assert data["total_size_bytes"] > 0
    assert all(isinstance(path, str) for path in data["unreferenced_images"])
    assert data["metrics"][data["all_images"][0]]["content_type"] == "image/png"
