# tests/test_kinds.py
"""
Tests for the eligible-kind configuration.
"""

import pytest

from xaml_autouid.exceptions import ConfigError
from xaml_autouid.kinds import DEFAULT_KINDS_PATH, EligibleKinds


def write_yaml(tmp_path, text):
    path = tmp_path / "kinds.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestEligibleKinds:
    """Tests for loading eligible kinds."""

    def test_default_list(self):
        """The bundled list covers common WPF controls but not property types."""
        kinds = EligibleKinds()
        assert kinds.path == DEFAULT_KINDS_PATH
        assert "Button" in kinds
        assert "Grid" in kinds
        assert "Setter" not in kinds

    @pytest.mark.parametrize("name", [
        "Bold", "Italic", "LineBreak", "InlineUIContainer",
        "Table", "TableCell", "BlockUIContainer",
        "GridViewColumn", "DataGridTextColumn", "DataGridTemplateColumn",
        "GradientStop", "SolidColorBrush", "RotateTransform", "Storyboard", "DoubleAnimation",
        "Trigger", "DataTrigger", "NavigationWindow", "Viewport3D", "Glyphs", "AdornerLayer",
    ])
    def test_default_list_covers_non_control_types(self, name):
        """Text elements, columns, freezables and triggers are eligible by default."""
        assert name in EligibleKinds()

    def test_custom_file(self, tmp_path):
        """A custom YAML list replaces the default."""
        kinds = EligibleKinds(write_yaml(tmp_path, "kinds:\n  - Button\n  - Gauge\n"))
        assert kinds.names == frozenset({"Button", "Gauge"})
        assert len(kinds) == 2
        assert list(kinds) == ["Button", "Gauge"]

    def test_missing_file(self, tmp_path):
        """A missing file raises ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            EligibleKinds(str(tmp_path / "nope.yaml"))
        assert "not found" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path):
        """Unparseable YAML raises ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            EligibleKinds(write_yaml(tmp_path, "kinds: [Button\n"))
        assert "Invalid YAML" in str(exc_info.value)

    def test_root_must_be_mapping(self, tmp_path):
        """A bare list at the root is rejected."""
        with pytest.raises(ConfigError):
            EligibleKinds(write_yaml(tmp_path, "- Button\n"))

    @pytest.mark.parametrize("text", [
        "kinds: [1]\n",
        "kinds: [Button, Button]\n",
        "kinds: ['my:Button']\n",
        "other: [Button]\n",
    ])
    def test_schema_violations(self, tmp_path, text):
        """Schema violations raise ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            EligibleKinds(write_yaml(tmp_path, text))
        assert "validation failed" in str(exc_info.value)

    def test_from_names_and_extend(self):
        """Sets can be built directly and extended without mutation."""
        base = EligibleKinds.from_names(["Button"])
        extended = base.extend(["Gauge"])
        assert "Gauge" in extended
        assert "Gauge" not in base
        assert "Button" in extended
