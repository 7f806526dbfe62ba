"""Tests for density classification and the validation passes."""

from pathlib import Path

from artwork_audit.models.image_model import Density, ImageAsset, ImageMetrics
from artwork_audit.services.density_classifier import DensityClassifier
from artwork_audit.services.validation import (
    detect_standard_platform_images,
    find_incorrect_device_suffix,
    find_incorrectly_sized_high_density,
)

ROOT = Path("/project/Images")


def assets(*names: str) -> list:
    return [ImageAsset(ROOT / name) for name in names]


def test_matched_pair_has_no_missing_flags() -> None:
    result = DensityClassifier().classify(assets("icon.png", "icon@2x.png", "bg.png"))

    assert result.standard_density_images == tuple(assets("bg.png", "icon.png"))
    assert result.high_density_images == tuple(assets("icon@2x.png"))
    assert result.standard_missing_high_density == tuple(assets("bg.png"))
    assert result.high_density_missing_standard == ()


def test_device_suffix_pairs() -> None:
    result = DensityClassifier().classify(assets("bg~ipad.png", "bg@2x~ipad.png", "btn@2x~iphone.png"))

    assert result.standard_missing_high_density == ()
    assert result.high_density_missing_standard == tuple(assets("btn@2x~iphone.png"))


def test_pairs_are_matched_within_the_same_directory() -> None:
    images = [ImageAsset(Path("/project/A/icon.png")), ImageAsset(Path("/project/B/icon@2x.png"))]
    result = DensityClassifier().classify(images)

    assert result.standard_missing_high_density == (images[0],)
    assert result.high_density_missing_standard == (images[1],)


def test_density_sets_partition_all_images() -> None:
    images = assets("a.png", "a@2x.png", "b~ipad.png", "c@2x~ipad.png", "d~iphone.png", "e.png")
    result = DensityClassifier().classify(images)

    standard = set(result.standard_density_images)
    high = set(result.high_density_images)
    assert standard | high == set(images)
    assert not standard & high
    assert set(result.standard_missing_high_density) <= standard
    assert set(result.high_density_missing_standard) <= high


def test_marker_anywhere_counts_as_high_density() -> None:
    (image,) = assets("logo@2xmas.png")
    assert image.density is Density.HIGH
    assert DensityClassifier().classify([image]).high_density_images == (image,)


def test_device_suffix_detection() -> None:
    tablet, phone, retina_phone, plain = assets("bg~ipad.png", "x~iphone.png", "x@2x~iphone.png", "bg.png")
    assert tablet.has_device_suffix
    assert phone.has_device_suffix
    assert retina_phone.has_device_suffix
    assert not plain.has_device_suffix


def test_incorrect_device_suffix() -> None:
    flagged = find_incorrect_device_suffix(assets("bg~iphone.png", "bg~ipad.png", "bg.png", "x@2x~iphone.png"))
    assert flagged == tuple(assets("bg~iphone.png", "x@2x~iphone.png"))


def test_incorrectly_sized_high_density() -> None:
    odd_width, odd_height, even = assets("a@2x.png", "b@2x.png", "c@2x.png")
    metrics = {
        odd_width: ImageMetrics(101, 200, 10, "image/png"),
        odd_height: ImageMetrics(100, 33, 10, "image/png"),
        even: ImageMetrics(100, 200, 10, "image/png"),
    }
    assert find_incorrectly_sized_high_density([odd_width, odd_height, even], metrics) == (odd_width, odd_height)


def test_standard_platform_images() -> None:
    images = assets("Icon.png", "Icon@2x.png", "icon-72.png", "other.png")
    images.append(ImageAsset(Path("/project/Other/Icon.png")))

    found, missing = detect_standard_platform_images(images, frozenset({"Icon.png", "Icon@2x.png", "Icon-72.png"}))

    assert [image.name for image in found] == ["Icon.png", "Icon@2x.png", "Icon.png"]
    assert missing == ("Icon-72.png",)
