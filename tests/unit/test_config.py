"""
Unit tests for the conversion configuration.
"""

from pathlib import Path

import pytest

from docconversion.config import ConversionConfig, DEFAULT_OUTPUT_FILE_NAME, DEFAULT_TEMPLATE_NAME


class TestConversionConfig:
    """Tests for ConversionConfig defaults and validation."""

    def test_defaults(self):
        config = ConversionConfig()
        assert config.output_file_name == DEFAULT_OUTPUT_FILE_NAME == "ReadMe.md"
        assert config.template_name == DEFAULT_TEMPLATE_NAME == "rm_creator.md"
        assert config.force is False
        assert config.attribution == "Aspose.Words"
        assert config.placeholder == "Illustration"
        assert config.soffice is None
        assert config.target_path == Path.cwd()
        assert config.source_path.name == "Downloads"

    def test_string_paths_converted(self, tmp_path):
        config = ConversionConfig(source_path=str(tmp_path), target_path=str(tmp_path))
        assert isinstance(config.source_path, Path)
        assert isinstance(config.target_path, Path)

    def test_instances_do_not_share_state(self):
        a = ConversionConfig()
        b = ConversionConfig(force=True)
        assert a.force is False
        assert b.force is True

    @pytest.mark.parametrize("name", ["", "sub/ReadMe.md"])
    def test_invalid_output_file_name(self, name):
        with pytest.raises(ValueError, match="Output file name"):
            ConversionConfig(output_file_name=name)

    def test_empty_attribution_rejected(self):
        with pytest.raises(ValueError, match="Attribution"):
            ConversionConfig(attribution="")

    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValueError, match="timeout"):
            ConversionConfig(soffice_timeout=0)
