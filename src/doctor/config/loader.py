import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Any, Dict, Optional

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

OUTPUT_FORMATS = ("json", "yaml")


class ConfigError(Exception):
    pass


@dataclass
class DoctorConfig:
    paths: List[str] = field(default_factory=list)
    glob: str = "*.javadoc"
    format: str = "json"


def _find_pyproject_toml(search_path: Path) -> Optional[Path]:
    current_dir = search_path.resolve()
    while True:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        if current_dir.parent == current_dir:
            return None
        current_dir = current_dir.parent


def load_config_from_path(search_path: Path) -> DoctorConfig:
    config_path = _find_pyproject_toml(search_path)
    if config_path is None:
        return DoctorConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{config_path}: {e}") from e

    doctor_data: Dict[str, Any] = data.get("tool", {}).get("doctor", {})
    defaults = DoctorConfig()

    paths = doctor_data.get("paths", defaults.paths)
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        raise ConfigError("'paths' must be a list of strings")

    output_format = doctor_data.get("format", defaults.format)
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"'format' must be one of {', '.join(OUTPUT_FORMATS)}, got {output_format!r}"
        )

    return DoctorConfig(
        paths=paths,
        glob=str(doctor_data.get("glob", defaults.glob)),
        format=output_format,
    )
