"""Native file selection dialog for batch input."""

from pathlib import Path
from typing import List, Union

SUPPORTED_EXTENSIONS = (
    "bmp", "png", "jpg", "jpeg", "webp", "gif", "tif", "tiff",
    "emf", "wmf", "exif", "heif", "ico",
)

DIALOG_TITLE = "Select Image Files"


def name_filter() -> str:
    """Qt name filter covering every supported extension."""
    patterns = " ".join(f"*.{ext}" for ext in SUPPORTED_EXTENSIONS)
    return f"Image-Files ({patterns})"


def is_supported(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower().lstrip(".") in SUPPORTED_EXTENSIONS


def pick_files() -> List[Path]:
    """
    Ask the user for image files with a native multi-select dialog.

    Returns:
        Selected paths; empty if the dialog was cancelled.
    """
    from PyQt6.QtWidgets import QApplication, QFileDialog

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
        app.setApplicationName("RGBA Splitter")

    files, _ = QFileDialog.getOpenFileNames(None, DIALOG_TITLE, "", name_filter())
    return [Path(f) for f in files]
