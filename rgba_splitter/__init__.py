from .channels import Channel, Pixel, extract, extract_plane
from .image_splitter import split_channels, split_image, load_image, save_channel, to_rgba
from .batch import FileResult, process, process_file, output_dir_for, output_path_for
from .file_picker import SUPPORTED_EXTENSIONS, pick_files

__all__ = [
    "Channel", "Pixel", "extract", "extract_plane",
    "split_channels", "split_image", "load_image", "save_channel", "to_rgba",
    "FileResult", "process", "process_file", "output_dir_for", "output_path_for",
    "SUPPORTED_EXTENSIONS", "pick_files",
]
