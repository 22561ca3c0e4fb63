"""Tests del export SVG (formato del documento y escritura a disco)."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from pixelpath.core.models import ClosedPath, Point
from pixelpath.svg.exporter import path_data, path_element, serialize_svg, subpath_data, write_svg
from pixelpath.utils.errors import PixelPathIOError

NS = "{http://www.w3.org/2000/svg}"


def _parse(text: str) -> ET.Element:
    return ET.fromstring(text.encode("utf-8"))


def _d(text: str) -> str:
    return _parse(text).find(f"{NS}path").get("d")


class TestPathData:
    def test_triangle(self) -> None:
        path = ClosedPath.from_coords([(0, 0), (100, 0), (100, 100)])
        assert subpath_data(path) == "M 0 0 L 100 0 L 100 100 z"

    def test_two_paths_single_space_between(self) -> None:
        paths = [ClosedPath.from_coords([(0, 0), (10, 0)]), ClosedPath.from_coords([(5, 5), (5, 15)])]
        assert path_data(paths) == "M 0 0 L 10 0 z M 5 5 L 5 15 z"

    def test_empty_path_skipped_entirely(self) -> None:
        paths = [
            ClosedPath.from_coords([(0, 0), (10, 0)]),
            ClosedPath(),
            ClosedPath.from_coords([(5, 5), (5, 15)]),
        ]
        assert path_data(paths) == "M 0 0 L 10 0 z M 5 5 L 5 15 z"

    def test_leading_empty_paths_leave_no_separator(self) -> None:
        paths = [ClosedPath(), ClosedPath(), ClosedPath.from_coords([(1, 2)])]
        assert path_data(paths) == "M 1 2 z"

    def test_empty_subpath_has_no_tokens(self) -> None:
        emptied = ClosedPath.from_coords([(3, 4)]).without_last_point()
        assert emptied.is_empty
        assert subpath_data(emptied) == ""

    def test_all_empty(self) -> None:
        assert path_data([ClosedPath(), ClosedPath()]) == ""
        assert path_data([]) == ""


class TestSerializeSvg:
    def test_reference_document(self) -> None:
        text = serialize_svg(Point(2, 2), [ClosedPath.from_coords([(0, 0), (100, 0), (100, 100)])])
        root = _parse(text)
        assert root.tag == f"{NS}svg"
        assert root.get("width") == "200"
        assert root.get("height") == "200"
        assert _d(text) == "M 0 0 L 100 0 L 100 100 z"

    def test_declares_svg_namespace_and_xml_header(self) -> None:
        text = serialize_svg(Point(1, 1), [])
        assert text.startswith("<?xml")
        assert 'xmlns="http://www.w3.org/2000/svg"' in text

    @pytest.mark.parametrize("grid", [Point(0, 0), Point(3, 1), Point(7, 11)])
    def test_size_ignores_path_contents(self, grid: Point) -> None:
        far = ClosedPath.from_coords([(0, 0), (5000, 0), (5000, 9000)])
        root = _parse(serialize_svg(grid, [far]))
        assert root.get("width") == str(grid.x * 100)
        assert root.get("height") == str(grid.y * 100)

    def test_geometry_outside_canvas_is_not_clipped(self) -> None:
        text = serialize_svg(Point(1, 1), [ClosedPath.from_coords([(0, 0), (500, 500)])])
        assert _d(text) == "M 0 0 L 500 500 z"

    def test_all_empty_keeps_empty_d_attribute(self) -> None:
        text = serialize_svg(Point(1, 1), [ClosedPath()])
        path = _parse(text).find(f"{NS}path")
        assert path is not None
        assert path.get("d") == ""

    def test_single_path_element(self) -> None:
        paths = [ClosedPath.from_coords([(0, 0), (10, 0)]), ClosedPath.from_coords([(5, 5), (5, 15)])]
        root = _parse(serialize_svg(Point(1, 1), paths))
        assert len(root.findall(f"{NS}path")) == 1

    def test_deterministic(self) -> None:
        paths = [ClosedPath.from_coords([(0, 0), (10, 0)])]
        assert serialize_svg(Point(1, 2), paths) == serialize_svg(Point(1, 2), paths)


class TestPathElement:
    def test_standalone_markup(self) -> None:
        assert path_element(ClosedPath.from_coords([(0, 0), (10, 0)])) == '<path d="M 0 0 L 10 0 z" />'

    def test_empty_path(self) -> None:
        assert path_element(ClosedPath()) == '<path d="" />'


class TestWriteSvg:
    def test_forces_svg_suffix(self, tmp_path) -> None:
        p = write_svg("<svg/>", tmp_path / "sub" / "out.txt")
        assert p.name == "out.svg"
        assert p.read_text(encoding="utf-8") == "<svg/>"

    def test_keeps_svg_suffix(self, tmp_path) -> None:
        p = write_svg("<svg/>", tmp_path / "dibujo.SVG")
        assert p == tmp_path / "dibujo.SVG"

    def test_io_failure_is_typed(self, tmp_path) -> None:
        target = tmp_path / "ocupado.svg"
        target.mkdir()
        with pytest.raises(PixelPathIOError):
            write_svg("<svg/>", target)
