import json
from pathlib import Path

from exif_sidecar.config import ConfigManager


def test_config_load_defaults() -> None:
    config = ConfigManager()
    assert config.get("file_extensions.image") == [".jpg", ".jpeg"]
    assert config.get("batch.stop_on_error") is True
    assert config.get("logging.level") == "INFO"
    assert config.get("logging.log_file") is None
    assert config.get("missing.key", "fallback") == "fallback"
    assert config.validate_config() == []


def test_config_runtime_override() -> None:
    config = ConfigManager()
    config.set("batch.stop_on_error", False)
    assert config.get("batch.stop_on_error") is False
    assert ConfigManager().get("batch.stop_on_error") is True


def test_config_validation() -> None:
    config = ConfigManager()
    config.set("logging.level", "LOUD")
    config.set("file_extensions.image", ["jpg"])
    config.set("batch.stop_on_error", "yes")
    errors = config.validate_config()
    assert len(errors) == 3
    assert any(error.startswith("logging.level") for error in errors)


def test_user_config_merges_with_defaults(tmp_path: Path) -> None:
    user_path = tmp_path / "config.json"
    user_path.write_text(
        json.dumps({"batch": {"stop_on_error": False}, "logging": {"log_file": "run.log"}}),
        encoding="utf-8",
    )
    config = ConfigManager(user_path)
    assert config.get("batch.stop_on_error") is False
    assert config.get("logging.log_file") == "run.log"
    assert config.get("logging.level") == "INFO"
    assert config.get("file_extensions.image") == [".jpg", ".jpeg"]
