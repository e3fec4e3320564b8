"""預設設定值。"""

DEFAULT_CONFIG = {
    "file_extensions": {
        "image": [".jpg", ".jpeg"],
    },
    "batch": {
        "stop_on_error": True,
    },
    "logging": {
        "level": "INFO",
        "log_file": None,
    },
}
