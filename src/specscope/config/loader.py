"""Configuration loading with pydantic-settings.

Supports loading configuration from multiple sources with precedence:
1. Direct kwargs (highest priority)
2. Environment variables (SPECSCOPE__SECTION__KEY)
3. Project config (.spec.yaml in the project root)
4. Global config (~/.config/specscope/config.yaml)
5. Built-in defaults (lowest priority)

The project config usually holds a single key::

    spec: ./MANIFEST.adoc
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from specscope.config.constants import PROJECT_CONFIG_NAME, SPEC_CONVENTIONS
from specscope.config.models import (
    DiffConfig,
    LoggingConfig,
    ParserConfig,
    ReportConfig,
    SpecScopeConfig,
)
from specscope.core.errors import ConfigError, SpecError
from specscope.core.logging import get_logger

log = get_logger("config.loader")

GLOBAL_CONFIG_PATH = Path("~/.config/specscope/config.yaml").expanduser()


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError.parse_error(str(path), str(e)) from e
    if not isinstance(data, dict):
        raise ConfigError.parse_error(str(path), "top level must be a mapping")
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class _YamlSource(PydanticBaseSettingsSource):
    """Settings source that reads from pre-loaded YAML config."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_config: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._yaml_config = yaml_config

    def get_field_value(
        self,
        field: Any,  # noqa: ARG002
        field_name: str,
    ) -> tuple[Any, str, bool]:
        val = self._yaml_config.get(field_name)
        return val, field_name, val is not None

    def __call__(self) -> dict[str, Any]:
        return self._yaml_config


def _make_settings_class(yaml_config: dict[str, Any]) -> type[BaseSettings]:
    """Create a Settings class with an instance-based YAML source."""

    class SpecScopeSettings(BaseSettings):
        """Root settings. Env vars: SPECSCOPE__SPEC, SPECSCOPE__LOGGING__LEVEL, etc."""

        model_config = SettingsConfigDict(
            env_prefix="SPECSCOPE__",
            env_nested_delimiter="__",
            case_sensitive=False,
        )

        spec: str | None = None
        logging: LoggingConfig = LoggingConfig()
        parser: ParserConfig = ParserConfig()
        diff: DiffConfig = DiffConfig()
        report: ReportConfig = ReportConfig()

        @classmethod
        def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,  # noqa: ARG003
            file_secret_settings: PydanticBaseSettingsSource,  # noqa: ARG003
        ) -> tuple[PydanticBaseSettingsSource, ...]:
            # Precedence (first wins): init kwargs > env vars > yaml files
            return (init_settings, env_settings, _YamlSource(settings_cls, yaml_config))

    return SpecScopeSettings


def load_config(project_root: Path | None = None, **kwargs: Any) -> SpecScopeConfig:
    """Load config: defaults < global yaml < project yaml < env vars < kwargs.

    Args:
        project_root: Directory holding .spec.yaml.
                      Defaults to current working directory.
        **kwargs: Override values (highest precedence).

    Returns:
        Fully resolved configuration object.

    Raises:
        ConfigError: On invalid YAML syntax or validation errors.
    """
    project_root = project_root or Path.cwd()

    yaml_config = _load_yaml(project_root / PROJECT_CONFIG_NAME)

    global_config = _load_yaml(GLOBAL_CONFIG_PATH)
    if global_config:
        yaml_config = _deep_merge(global_config, yaml_config)

    settings_cls = _make_settings_class(yaml_config)
    try:
        settings = settings_cls(**kwargs)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(loc) for loc in err["loc"])
        raise ConfigError.invalid_value(field, err.get("input"), err["msg"]) from e
    return SpecScopeConfig.model_validate(settings.model_dump())


def find_spec(project_root: Path | None = None, config: SpecScopeConfig | None = None) -> Path:
    """Locate the root document.

    A configured ``spec`` path wins and must exist. Otherwise the first
    existing entry of SPEC_CONVENTIONS under the project root is used.

    Raises:
        ConfigError: Configured spec path does not exist.
        SpecError: No configured path and no convention matched.
    """
    project_root = (project_root or Path.cwd()).resolve()
    if config is None:
        config = load_config(project_root)

    if config.spec:
        path = Path(config.spec).expanduser()
        if not path.is_absolute():
            path = project_root / path
        path = path.resolve()
        if path.is_file():
            return path
        raise ConfigError.file_not_found(str(path))

    for rel in SPEC_CONVENTIONS:
        candidate = project_root / rel
        if candidate.is_file():
            log.debug("spec_found_by_convention", path=str(candidate))
            return candidate

    raise SpecError.not_found(list(SPEC_CONVENTIONS))
