"""Tests for the command line entry point."""

import numpy as np
import pytest
from PIL import Image

import main


@pytest.fixture
def texture(tmp_path):
    path = tmp_path / "texture.png"
    arr = np.zeros((4, 6, 4), dtype=np.uint8)
    arr[..., 0] = 200
    arr[..., 3] = 100
    Image.fromarray(arr).save(path)
    return path


class TestParseArgs:
    def test_defaults(self):
        args = main.parse_args([])

        assert args.files == []
        assert args.workers is None

    def test_rejects_unsupported_extension(self):
        with pytest.raises(SystemExit) as exc:
            main.parse_args(["notes.txt"])
        assert exc.value.code == 2

    def test_rejects_zero_workers(self):
        with pytest.raises(SystemExit):
            main.parse_args(["a.png", "--workers", "0"])


class TestMain:
    def test_cancelled_dialog_is_silent_noop(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(main, "pick_files", lambda: [])
        monkeypatch.setattr(main, "process", lambda *a, **k: pytest.fail("process called"))

        assert main.main([]) == 0
        assert capsys.readouterr().out == ""
        assert list(tmp_path.iterdir()) == []

    def test_dialog_selection_is_processed(self, texture, monkeypatch):
        monkeypatch.setattr(main, "pick_files", lambda: [texture])

        assert main.main(["--workers", "1"]) == 0
        assert (texture.parent / "texture" / "texture_A.png").exists()

    def test_files_from_arguments(self, texture, monkeypatch):
        monkeypatch.setattr(main, "pick_files", lambda: pytest.fail("dialog shown"))

        assert main.main([str(texture), "-w", "1"]) == 0

        with Image.open(texture.parent / "texture" / "texture_R.png") as img:
            assert img.size == (6, 4)
            assert np.all(np.array(img) == 200)

    def test_failed_file_sets_exit_status(self, texture, tmp_path):
        broken = tmp_path / "broken.png"
        broken.write_bytes(b"garbage")

        assert main.main([str(texture), str(broken), "-w", "1"]) == 1
        assert (texture.parent / "texture" / "texture_G.png").exists()
