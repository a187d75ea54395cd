"""Tests for configuration loading, merging and validation."""

from pathlib import Path

import pytest
import yaml

from javadoc_to_md.deep_merge import deep_merge
from javadoc_to_md.errors import ConfigError
from javadoc_to_md.load_config import DEFAULT_CONFIG, load_config
from javadoc_to_md.options import ABSOLUTE, COMMONMARK, ConverterOptions


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    assert deep_merge({"a": 1, "b": 2}, {"b": 3, "c": 4}) == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Mappings such as externalLinks merge key by key."""
    base = {"externalLinks": {"java.": "https://a"}}
    update = {"externalLinks": {"javax.": "https://b"}}
    assert deep_merge(base, update) == {
        "externalLinks": {"java.": "https://a", "javax.": "https://b"}
    }


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3, 4]}) == {"arr": [3, 4]}


def test_deep_merge_custom_tags_additive() -> None:
    """customTags entries are added, deduplicated and sorted."""
    merged = deep_merge({"customTags": ["todo", "apiNote"]}, {"customTags": ["todo", "fixme"]})
    assert merged == {"customTags": ["apiNote", "fixme", "todo"]}


def test_deep_merge_does_not_mutate_inputs() -> None:
    """Both inputs are left untouched."""
    base = {"nested": {"x": 1}}
    deep_merge(base, {"nested": {"x": 2}})
    assert base == {"nested": {"x": 1}}


def test_load_config_defaults() -> None:
    """Without a file the defaults are returned as a fresh copy."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    config["externalLinks"]["java."] = "x"
    assert DEFAULT_CONFIG["externalLinks"] == {}


def test_load_config_missing_file(tmp_path: Path) -> None:
    """A missing config file falls back to the defaults."""
    assert load_config(str(tmp_path / "nope.yml")) == DEFAULT_CONFIG


def test_load_config_from_file(tmp_path: Path) -> None:
    """User values are merged over the defaults."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.safe_dump(
            {
                "outputFormat": "commonmark",
                "linkBaseStyle": "absolute",
                "linkRoot": "/api",
                "customTags": ["todo"],
                "externalLinks": {"java.": "https://docs.oracle.com/javase/8/docs/api/"},
            }
        ),
        encoding="utf-8",
    )
    config = load_config(str(config_file))
    assert config["outputFormat"] == "commonmark"
    assert config["includeSignatures"] is True
    assert config["customTags"] == ["todo"]

    options = ConverterOptions.from_config(config)
    assert options.output_format == COMMONMARK
    assert options.link_base_style == ABSOLUTE
    assert options.link_root == "/api"
    assert options.custom_tags == ("todo",)
    assert options.external_links == {"java.": "https://docs.oracle.com/javase/8/docs/api/"}


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """A YAML list at the top level is a configuration error."""
    config_file = tmp_path / "config.yml"
    config_file.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="top level must be a mapping"):
        load_config(str(config_file))


def test_options_defaults() -> None:
    """Defaults match the documented configuration."""
    options = ConverterOptions.from_config({})
    assert options == ConverterOptions()
    assert options.is_github
    assert options.workers == 4


@pytest.mark.parametrize(
    ("config", "message"),
    [
        ({"outputFormat": "html"}, "outputFormat"),
        ({"linkBaseStyle": "sideways"}, "linkBaseStyle"),
        ({"workers": "many"}, "workers"),
        ({"workers": -1}, "workers"),
        ({"includePrivate": "yes"}, "includePrivate"),
        ({"customTags": "todo"}, "customTags"),
        ({"ignoreModifiers": "protected"}, "ignoreModifiers"),
        ({"externalLinks": {"java.": 3}}, "externalLinks"),
    ],
)
def test_options_validation(config: dict, message: str) -> None:
    """Invalid values raise ConfigError naming the key."""
    with pytest.raises(ConfigError, match=message):
        ConverterOptions.from_config(config)


def test_custom_tags_accept_at_prefix() -> None:
    """Custom tag names may be written with their @."""
    assert ConverterOptions.from_config({"customTags": ["@todo"]}).custom_tags == ("todo",)


def test_ignore_modifiers_option() -> None:
    """ignoreModifiers defaults to nothing and becomes a tuple."""
    assert load_config()["ignoreModifiers"] == []
    options = ConverterOptions.from_config({"ignoreModifiers": ["protected", "static"]})
    assert options.ignore_modifiers == ("protected", "static")
