"""
Tests for per-variant icon export.

Renders real images with PIL and writes them to tmp_path. Failing icons
and writers are small stand-ins for the collaborator interfaces.
"""

import pytest
from PIL import Image

from symbolic.errors import RenderFailure, WriteFailure
from symbolic.export.icon import Icon
from symbolic.export.models import IconSetDefinition, VariantDefinition
from symbolic.export.pipeline import IconExportPipeline, suggested_name
from symbolic.export.writer import SnapshotWriter


class FailingIcon:
    """Icon that cannot render one particular variant."""

    name = "Flaky"
    size = 16

    def __init__(self, failing_id, error=None):
        self.failing_id = failing_id
        self.error = error or RenderFailure("no pixels")
        self.icon = Icon(name=self.name, size=self.size)

    def render(self, definition):
        if definition.id == self.failing_id:
            raise self.error
        return self.icon.render(definition)


class FailingWriter:
    def write(self, image, suggested_name, directory):
        raise OSError("disk full")


@pytest.fixture
def icon():
    return Icon(name="Test", size=16)


@pytest.fixture
def pipeline(tmp_path):
    return IconExportPipeline(max_workers=3, directory=tmp_path)


@pytest.fixture
def duplicate_scales():
    return IconSetDefinition("Duplicates", [
        VariantDefinition(scale=1, description="small"),
        VariantDefinition(scale=1, description="small-alt"),
        VariantDefinition(scale=2),
    ])


class TestSnapshot:
    """Test rendering and writing a single variant."""

    def test_writes_image_file(self, pipeline, icon, tmp_path):
        path = pipeline.snapshot(icon, VariantDefinition(scale=2), tmp_path)
        assert path.exists()
        assert tmp_path in path.parents
        with Image.open(path) as image:
            assert image.size == (32, 32)
            assert image.format == "PNG"

    def test_file_name_describes_variant(self, pipeline, icon, tmp_path):
        path = pipeline.snapshot(icon, VariantDefinition(scale=2, size=128), tmp_path)
        assert path.name == "Test 128pt@2x.png"

    def test_repeated_snapshots_get_distinct_files(self, pipeline, icon, tmp_path):
        definition = VariantDefinition(scale=1)
        first = pipeline.snapshot(icon, definition, tmp_path)
        second = pipeline.snapshot(icon, definition, tmp_path)
        assert first != second
        assert first.exists() and second.exists()

    def test_unsupported_scale_is_render_failure(self, pipeline, icon, tmp_path):
        with pytest.raises(RenderFailure):
            pipeline.snapshot(icon, VariantDefinition(scale=0), tmp_path)

    def test_collaborator_error_is_render_failure(self, pipeline, tmp_path):
        flaky = FailingIcon("1x", error=ValueError("bad state"))
        with pytest.raises(RenderFailure):
            pipeline.snapshot(flaky, VariantDefinition(scale=1), tmp_path)

    def test_missing_image_is_render_failure(self, pipeline, tmp_path):
        class EmptyIcon:
            name = "Empty"

            def render(self, definition):
                return None

        with pytest.raises(RenderFailure):
            pipeline.snapshot(EmptyIcon(), VariantDefinition(scale=1), tmp_path)

    def test_unwritable_directory_is_write_failure(self, pipeline, icon, tmp_path):
        blocker = tmp_path / "not-a-directory"
        blocker.write_text("")
        with pytest.raises(WriteFailure):
            pipeline.snapshot(icon, VariantDefinition(scale=1), blocker)

    def test_writer_errors_are_write_failures(self, icon, tmp_path):
        pipeline = IconExportPipeline(writer=FailingWriter())
        with pytest.raises(WriteFailure):
            pipeline.snapshot(icon, VariantDefinition(scale=1), tmp_path)


class TestExportSet:
    """Test exporting every variant of an icon set."""

    def test_duplicate_scales_are_all_exported_in_order(self, pipeline, icon, duplicate_scales):
        items = pipeline.export(icon, duplicate_scales)
        assert [item.definition for item in items] == list(duplicate_scales.definitions)
        assert [item.index for item in items] == [0, 1, 2]
        assert [item.definition.id for item in items] == ["1x-small", "1x-small-alt", "2x"]
        assert all(not item.is_empty for item in items)
        assert len({item.path for item in items}) == 3

    def test_failed_variant_is_isolated(self, pipeline, duplicate_scales):
        items = pipeline.export(FailingIcon("1x-small-alt"), duplicate_scales)
        assert len(items) == 3
        assert items[0].path.exists()
        assert items[1].is_empty
        assert items[1].uri is None
        assert isinstance(items[1].error, RenderFailure)
        assert items[2].path.exists()

    def test_write_failures_give_inert_items(self, icon, duplicate_scales, tmp_path):
        pipeline = IconExportPipeline(writer=FailingWriter(), directory=tmp_path)
        items = pipeline.export(icon, duplicate_scales)
        assert [item.is_empty for item in items] == [True, True, True]
        assert all(isinstance(item.error, WriteFailure) for item in items)

    def test_uri_points_at_file(self, pipeline, icon):
        item = pipeline.export_item(icon, VariantDefinition(scale=1))
        assert item.uri.startswith("file://")
        assert item.uri.endswith(".png")

    def test_defaults_to_pipeline_directory(self, icon, tmp_path):
        pipeline = IconExportPipeline(directory=tmp_path / "exports")
        item = pipeline.export_item(icon, VariantDefinition(scale=1))
        assert (tmp_path / "exports") in item.path.parents

    def test_empty_icon_set(self, pipeline, icon):
        assert pipeline.export(icon, IconSetDefinition("Empty")) == []


class TestSnapshotWriter:
    """Test file naming and formats."""

    def test_unsafe_characters_are_removed(self, tmp_path):
        writer = SnapshotWriter()
        path = writer.write(Image.new("RGBA", (4, 4)), 'a/b:c*?"', tmp_path)
        assert path.name == "abc.png"

    def test_jpeg_output(self, tmp_path):
        writer = SnapshotWriter("jpeg")
        path = writer.write(Image.new("RGBA", (4, 4)), "Icon", tmp_path)
        assert path.suffix == ".jpg"
        with Image.open(path) as image:
            assert image.format == "JPEG"

    def test_unknown_format_is_rejected(self):
        with pytest.raises(ValueError):
            SnapshotWriter("svg")

    def test_suggested_name_without_size(self):
        class Bare:
            name = "Bare"

        assert suggested_name(Bare(), VariantDefinition(scale=3)) == "Bare@3x"
