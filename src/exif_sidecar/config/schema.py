"""設定檔驗證邏輯。"""

from __future__ import annotations

from typing import Any

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def validate_config(config: dict[str, Any]) -> list[str]:
    errors: list[str] = []

    def add_error(path: str, message: str) -> None:
        errors.append(f"{path}: {message}")

    file_extensions = config.get("file_extensions", {})
    image_exts = file_extensions.get("image") if isinstance(file_extensions, dict) else None
    if not isinstance(image_exts, list) or not image_exts:
        add_error("file_extensions.image", "必須是非空清單")
    elif any(not isinstance(item, str) or not item.startswith(".") for item in image_exts):
        add_error("file_extensions.image", "清單項目必須是以 . 開頭的字串")

    batch = config.get("batch", {})
    stop_on_error = batch.get("stop_on_error", True) if isinstance(batch, dict) else None
    if not isinstance(stop_on_error, bool):
        add_error("batch.stop_on_error", "必須是布林值")

    logging_config = config.get("logging", {})
    if not isinstance(logging_config, dict):
        add_error("logging", "必須是物件")
        return errors
    level = logging_config.get("level", "INFO")
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        add_error("logging.level", "必須是 DEBUG、INFO、WARNING 或 ERROR")
    log_file = logging_config.get("log_file")
    if log_file is not None and (not isinstance(log_file, str) or not log_file.strip()):
        add_error("logging.log_file", "必須是 null 或非空字串")

    return errors
