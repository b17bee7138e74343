"""Pytest configuration and shared fixtures for text2dxf tests."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest
from ezdxf.lldxf.tagger import ascii_tags_loader

from text2dxf.application import DrawingSession
from text2dxf.domain import Document, Point2D, create


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests that write files"
    )


# =============================================================================
# DXF reading helpers
# =============================================================================


Tag = tuple[int, str]

# Layers every DXF file written by ezdxf holds, in lower case
RESERVED_LAYERS = frozenset({"0", "defpoints"})


class DxfTags:
    """Splits encoded DXF text into sections, table entries and entity records."""

    def tags(self, text: str) -> list[Tag]:
        """All (group code, value) pairs of a DXF text."""
        return [(tag.code, tag.value) for tag in ascii_tags_loader(StringIO(text))]

    def section(self, text: str, name: str) -> list[Tag]:
        """Tags between ``0/SECTION 2/<name>`` and the matching ``0/ENDSEC``."""
        tags = self.tags(text)
        for index in range(len(tags) - 1):
            if tags[index] == (0, "SECTION") and tags[index + 1] == (2, name):
                body: list[Tag] = []
                for tag in tags[index + 2 :]:
                    if tag == (0, "ENDSEC"):
                        return body
                    body.append(tag)
        raise AssertionError(f"Section {name} not found")

    def records(self, tags: list[Tag]) -> list[list[Tag]]:
        """Group tags into records, each starting with a group code 0 tag."""
        records: list[list[Tag]] = []
        for tag in tags:
            if tag[0] == 0:
                records.append([tag])
            elif records:
                records[-1].append(tag)
        return records

    def entities(self, text: str) -> list[list[Tag]]:
        """Records of the ENTITIES section."""
        return self.records(self.section(text, "ENTITIES"))

    def header_var(self, text: str, name: str) -> list[str]:
        """Values of the header variable ``name``, one per group code."""
        values: list[str] = []
        found = False
        for code, value in self.section(text, "HEADER"):
            if code == 9:
                if found:
                    break
                found = value == name
            elif found:
                values.append(value)
        assert found, f"header variable {name} not found"
        return values

    def layer_entries(self, text: str, reserved: bool = False) -> list[list[Tag]]:
        """LAYER entries of the LAYER table.

        Layer "0" and ezdxf's "Defpoints" are skipped unless ``reserved`` is set.
        """
        return [
            record
            for record in self.records(self.section(text, "TABLES"))
            if record[0] == (0, "LAYER")
            and (reserved or self.value(record, 2).lower() not in RESERVED_LAYERS)
        ]

    @staticmethod
    def values(record: list[Tag], code: int) -> list[str]:
        """All values with the given group code in one record."""
        return [value for tag_code, value in record if tag_code == code]

    @staticmethod
    def value(record: list[Tag], code: int) -> str:
        """The single value with the given group code in one record."""
        found = [value for tag_code, value in record if tag_code == code]
        assert len(found) == 1, f"expected one group {code}, found {found}"
        return found[0]


@pytest.fixture
def dxf() -> DxfTags:
    """Helper for inspecting encoded DXF text."""
    return DxfTags()


# =============================================================================
# Shared documents and sessions
# =============================================================================


@pytest.fixture
def document() -> Document:
    """A freshly created document with the standard layers."""
    return create()


@pytest.fixture
def room_points() -> tuple[Point2D, ...]:
    """Corners of a 3 x 5 m room."""
    return (Point2D(0, 0), Point2D(3, 0), Point2D(3, 5), Point2D(0, 5))


@pytest.fixture
def session(tmp_path: Path) -> DrawingSession:
    """A drawing session saving relative filenames under tmp_path."""
    return DrawingSession(output_dir=tmp_path)
