import logging

import pytest

from openapi_schema_checks.config import CompilerConfig
from openapi_schema_checks.exceptions import ConfigurationError

ENV_VARS = (
    "OPENAPI_SCHEMA_CHECKS_ROOT_PATH",
    "OPENAPI_SCHEMA_CHECKS_REAL_NUMBER_BOUNDS",
    "OPENAPI_SCHEMA_CHECKS_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults() -> None:
    config = CompilerConfig()
    assert config.root_path == "root"
    assert config.real_number_bounds is False
    assert config.log_level == "WARNING"


def test_from_env_defaults(clean_env) -> None:
    assert CompilerConfig.from_env() == CompilerConfig()


def test_from_env(clean_env) -> None:
    clean_env.setenv("OPENAPI_SCHEMA_CHECKS_ROOT_PATH", "request.body")
    clean_env.setenv("OPENAPI_SCHEMA_CHECKS_REAL_NUMBER_BOUNDS", "true")
    clean_env.setenv("OPENAPI_SCHEMA_CHECKS_LOG_LEVEL", "debug")

    config = CompilerConfig.from_env()

    assert config == CompilerConfig(root_path="request.body", real_number_bounds=True, log_level="debug")


def test_from_env_rejects_bad_boolean(clean_env) -> None:
    clean_env.setenv("OPENAPI_SCHEMA_CHECKS_REAL_NUMBER_BOUNDS", "maybe")
    with pytest.raises(ConfigurationError) as excinfo:
        CompilerConfig.from_env()
    assert excinfo.value.path == "OPENAPI_SCHEMA_CHECKS_REAL_NUMBER_BOUNDS"


def test_from_yaml(tmp_path) -> None:
    path = tmp_path / "checks.yaml"
    path.write_text("root_path: body\nreal_number_bounds: true\n", encoding="utf-8")

    config = CompilerConfig.from_yaml(path)

    assert config == CompilerConfig(root_path="body", real_number_bounds=True)


def test_from_yaml_empty_file_gives_defaults(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert CompilerConfig.from_yaml(path) == CompilerConfig()


@pytest.mark.parametrize(
    "content, reason",
    [
        ("- a\n- b\n", "Config file must contain a mapping"),
        ("root_path: body\nstrict: true\n", "Unknown option(s): strict"),
        ("real_number_bounds: 'yes'\n", "Expected bool, got str"),
        ("root_path: 5\n", "Expected str, got int"),
        ("log_level: LOUD\n", "Unknown log level 'LOUD'"),
    ],
)
def test_from_yaml_rejects_bad_content(tmp_path, content, reason) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError) as excinfo:
        CompilerConfig.from_yaml(path)
    assert excinfo.value.reason == reason


def test_from_yaml_invalid_yaml(tmp_path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("root_path: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError) as excinfo:
        CompilerConfig.from_yaml(path)
    assert excinfo.value.reason.startswith("Invalid YAML")


def test_from_yaml_missing_file(tmp_path) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        CompilerConfig.from_yaml(tmp_path / "missing.yaml")
    assert excinfo.value.reason.startswith("Unable to read config file")


def test_empty_root_path_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        CompilerConfig(root_path="")


def test_set_logging_configures_package_logger(package_logger) -> None:
    logger = CompilerConfig(log_level="DEBUG").set_logging()

    assert logger is package_logger
    assert logger.level == logging.DEBUG
    installed = [h for h in logger.handlers if getattr(h, "_openapi_schema_checks", False)]
    assert len(installed) == 2

    # a second call replaces rather than stacks handlers
    CompilerConfig(log_level="INFO").set_logging()
    installed = [h for h in logger.handlers if getattr(h, "_openapi_schema_checks", False)]
    assert len(installed) == 2
    assert logger.level == logging.INFO


def test_set_logging_leaves_root_logger_alone(package_logger) -> None:
    root_handlers = list(logging.getLogger().handlers)
    CompilerConfig().set_logging()
    assert logging.getLogger().handlers == root_handlers
