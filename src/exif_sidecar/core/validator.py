"""輸入路徑檢查。"""

from __future__ import annotations

import os
import stat
from typing import Iterable, Union

from ..errors import InvalidArgumentError, SidecarIOError

DEFAULT_IMAGE_EXTENSIONS = (".jpg", ".jpeg")


def has_image_extension(path: str, image_extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS) -> bool:
    lowered = path.lower()
    return any(lowered.endswith(ext.lower()) for ext in image_extensions)


def validate_input(
    path: Union[str, os.PathLike],
    image_extensions: Iterable[str] = DEFAULT_IMAGE_EXTENSIONS,
) -> None:
    file_name = os.fspath(path)
    extensions = tuple(image_extensions)
    try:
        stat_result = os.stat(file_name)
    except OSError as exc:
        raise SidecarIOError.from_os_error(exc, file_name) from exc

    if stat.S_ISDIR(stat_result.st_mode):
        raise InvalidArgumentError(
            f"The input argument {file_name} is a directory rather than an image file."
        )
    if not has_image_extension(file_name, extensions):
        raise InvalidArgumentError(
            f"The input argument {file_name} must be a valid {' or '.join(extensions)} image."
        )
