"""Load ViewKitConfig from viewkit.toml or viewkit.yaml if present.

Merges file config with keyword overrides. Overrides win.
"""

from __future__ import annotations

from pathlib import Path

from viewkit.config import ViewKitConfig

_FILE_KEYS = frozenset({
    "path", "title", "start_view",
    "templates_dir", "static_dir", "template_suffix",
    "host", "port", "debug",
})


def load_config(root: Path, **overrides: object) -> ViewKitConfig:
    """Load ViewKitConfig from root, optionally merging viewkit.toml/yaml.

    ``None`` overrides (unset CLI flags) do not shadow file values.
    """
    file_config = _read_config_file(root)
    given = {k: v for k, v in overrides.items() if v is not None}
    merged = {**file_config, **given}
    return ViewKitConfig(root=root, **merged)  # type: ignore[arg-type]


def _read_config_file(root: Path) -> dict[str, object]:
    """Read viewkit config from toml/yaml if present. Returns empty dict otherwise."""
    toml_path = root / "viewkit.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    for name in ("viewkit.yaml", "viewkit.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    """Parse YAML config. Returns empty dict on error."""
    import yaml

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(data, dict):
        return {}
    return _flatten_viewkit_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    """Parse TOML config. Returns empty dict on error."""
    import tomllib

    try:
        data = tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    return _flatten_viewkit_section(data)


def _flatten_viewkit_section(data: dict[str, object]) -> dict[str, object]:
    """Extract viewkit.* keys and known top-level keys into one dict."""
    result: dict[str, object] = {}
    for k, v in data.items():
        if k in _FILE_KEYS:
            result[k] = v
    section = data.get("viewkit")
    if isinstance(section, dict):
        for k, v in section.items():
            if k in _FILE_KEYS:
                result[k] = v
    return result
