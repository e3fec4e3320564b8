"""工具模組。"""

from . import exif_display, time_utils
from .error_handler import ErrorHandler
from .logger import get_logger

__all__ = ["exif_display", "time_utils", "ErrorHandler", "get_logger"]
