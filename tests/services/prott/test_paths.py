from __future__ import annotations

import pytest

from protter.services.prott.paths import ArtboardMatcher


@pytest.fixture()
def matcher() -> ArtboardMatcher:
    return ArtboardMatcher(sep="/")


def test_match_project_and_screen(matcher: ArtboardMatcher) -> None:
    artboard = matcher.match("a/exportedArtboards/Proj/Screen1.png")
    assert artboard is not None
    assert (artboard.project_name, artboard.screen_name) == ("Proj", "Screen1")
    assert artboard.path == "a/exportedArtboards/Proj/Screen1.png"


def test_match_at_path_start_without_project(matcher: ArtboardMatcher) -> None:
    artboard = matcher.match("exportedArtboards/Screen1.png")
    assert artboard is not None
    assert artboard.project_name == ""
    assert artboard.screen_name == "Screen1"


def test_nested_directories_stay_in_project_name(matcher: ArtboardMatcher) -> None:
    artboard = matcher.match("a/exportedArtboards/Proj/sub/Screen1.png")
    assert artboard is not None
    assert artboard.project_name == "Proj/sub"
    assert artboard.screen_name == "Screen1"


@pytest.mark.parametrize(
    "path",
    [
        "random/file.png",
        "a/exportedArtboards/Proj/Screen1.jpg",
        "a/myexportedArtboards/Proj/Screen1.png",
        "a/exportedArtboardsX/Proj/Screen1.png",
        "a/exportedArtboards",
        "a/exportedArtboards/Proj",
        "exportedArtboards.png",
    ],
)
def test_non_artboards_are_not_matched(matcher: ArtboardMatcher, path: str) -> None:
    assert matcher.match(path) is None


def test_screen_name_keeps_inner_dots(matcher: ArtboardMatcher) -> None:
    artboard = matcher.match("/work/exportedArtboards/Home/Login v1.2.png")
    assert artboard is not None
    assert artboard.project_name == "Home"
    assert artboard.screen_name == "Login v1.2"


def test_windows_separator() -> None:
    matcher = ArtboardMatcher(sep="\\")
    artboard = matcher.match(r"C:\design\exportedArtboards\Proj\Screen1.png")
    assert artboard is not None
    assert (artboard.project_name, artboard.screen_name) == ("Proj", "Screen1")
    assert matcher.match("a/exportedArtboards/Proj/Screen1.png") is None


def test_pattern_is_compiled_once() -> None:
    matcher = ArtboardMatcher(sep="/")
    pattern = matcher.pattern
    matcher.match("a/exportedArtboards/Proj/Screen1.png")
    matcher.match("random/file.png")
    assert matcher.pattern is pattern
