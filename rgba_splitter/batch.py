"""Batch conversion of image files into per-channel PNG maps."""

import sys
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import List, NamedTuple, Optional, Sequence, Union

from .channels import Channel
from .image_splitter import load_image, save_channel, split_channels


class FileResult(NamedTuple):
    """Outcome of splitting one input file."""

    source: Path
    output_dir: Path
    written: List[Path]
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def output_dir_for(path: Union[str, Path]) -> Path:
    """Sibling directory named after the file without its extension."""
    path = Path(path)
    return path.parent / path.stem


def output_path_for(path: Union[str, Path], channel: Channel) -> Path:
    """Output file for one channel, e.g. ``name/name_R.png``."""
    path = Path(path)
    return output_dir_for(path) / f"{path.stem}_{channel.name}.png"


def process_file(path: Union[str, Path]) -> List[Path]:
    """
    Split one image file into four channel PNGs next to it.

    Args:
        path: Input image file.

    Returns:
        Paths of the written files, in R, G, B, A order.

    Raises:
        PIL.UnidentifiedImageError, OSError: If decoding or writing fails.
            Files already written for this input are left in place.
    """
    path = Path(path)
    output_dir = output_dir_for(path)
    output_dir.mkdir(parents=True, exist_ok=True)

    rgba = load_image(path)
    planes = split_channels(rgba)

    return [
        save_channel(planes[channel], output_path_for(path, channel))
        for channel in Channel
    ]


def process(
    paths: Sequence[Union[str, Path]], max_workers: Optional[int] = None
) -> List[FileResult]:
    """
    Split every file in a batch, one parallel task per file.

    A failing file is reported and recorded in its result; the other
    files are unaffected. Returns only after every task has finished.

    Args:
        paths: Input image files.
        max_workers: Worker process limit (default: executor default).

    Returns:
        One FileResult per input, in input order.
    """
    paths = [Path(p) for p in paths]
    if not paths:
        return []

    total = len(paths)
    results: List[Optional[FileResult]] = [None] * total

    print(f"Splitting {total} file(s) in parallel...", flush=True)

    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(process_file, p): i for i, p in enumerate(paths)}

        for future in as_completed(futures):
            idx = futures[future]
            source = paths[idx]
            try:
                written = future.result()
            except Exception as e:
                results[idx] = FileResult(source, output_dir_for(source), [], e)
                print(f"  Failed {source}: {e}", file=sys.stderr, flush=True)
                continue

            results[idx] = FileResult(source, output_dir_for(source), written)
            print(f"  Saved {len(written)} channels to {output_dir_for(source)}", flush=True)

    failed = sum(1 for r in results if not r.ok)
    print(f"Split complete! {total - failed}/{total} file(s) succeeded.", flush=True)

    return results
