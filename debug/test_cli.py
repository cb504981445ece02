"""End-to-end runs of main() against images in a temporary directory"""
import pytest
from PIL import Image

from core.errors import InvalidOverrideError, UsageError
from main import main
from utils.cli import parse_args, parse_override


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("RESIZE_IMAGES_OUTPUT_DIR", raising=False)
    monkeypatch.delenv("RESIZE_IMAGES_VERBOSE", raising=False)
    return tmp_path


@pytest.fixture
def raw_photo(workdir):
    raw = workdir / "raw"
    raw.mkdir()
    path = raw / "photo.jpg"
    Image.new("RGB", (2000, 1000), color="green").save(path, format="JPEG")
    return path


def _files(directory):
    return sorted(p.relative_to(directory).as_posix() for p in directory.rglob("*") if p.is_file())


def test_no_arguments_prints_usage(workdir, capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["-h"], ["--help"], ["--help", "nope.jpg", "abc"]])
def test_help_exits_zero_without_writing(workdir, capsys, argv):
    assert main(argv) == 0
    assert "Usage:" in capsys.readouterr().out
    assert _files(workdir) == []


def test_invalid_override(workdir, raw_photo, capsys):
    assert main([str(raw_photo), "abc"]) == 1
    assert "max_dimension must be a positive integer" in capsys.readouterr().out
    assert _files(workdir) == ["raw/photo.jpg"]


def test_missing_input(workdir, capsys):
    assert main(["nope.jpg"]) == 1
    assert "File 'nope.jpg' not found" in capsys.readouterr().out
    assert _files(workdir) == []


def test_too_many_arguments(workdir, raw_photo):
    assert main([str(raw_photo), "900", "extra"]) == 1


def test_creates_thumbnail_and_smaller(workdir, raw_photo, capsys):
    assert main(["raw/photo.jpg"]) == 0

    out = capsys.readouterr().out
    assert "Original image dimensions: 2000x1000" in out
    assert "Aspect ratio: 2.00 (classified as 3x1)" in out
    assert "Thumbnail max dimension: 600px" in out
    assert "Smaller version max dimension: 1600px" in out
    assert "  - photo-thumbnail.jpg (600px max)" in out
    assert "  - photo.jpg (1600px max)" in out

    with Image.open(workdir / "photo-thumbnail.jpg") as thumb:
        assert thumb.size == (600, 300)
    with Image.open(workdir / "photo.jpg") as smaller:
        assert smaller.size == (1600, 800)


def test_override_changes_smaller_only(workdir, raw_photo, capsys):
    assert main(["raw/photo.jpg", "900"]) == 0
    assert "Smaller version max dimension: 900px" in capsys.readouterr().out

    with Image.open(workdir / "photo-thumbnail.jpg") as thumb:
        assert thumb.size == (600, 300)
    with Image.open(workdir / "photo.jpg") as smaller:
        assert smaller.size == (900, 450)


def test_warns_when_overwriting_input(workdir, capsys):
    Image.new("RGB", (1000, 1000)).save(workdir / "square.jpg", format="JPEG")

    assert main(["square.jpg"]) == 0

    assert "will overwrite the original file" in capsys.readouterr().out
    with Image.open(workdir / "square.jpg") as smaller:
        assert smaller.size == (1200, 1200)


def test_output_dir_from_environment(workdir, raw_photo, monkeypatch):
    out_dir = workdir / "out"
    out_dir.mkdir()
    monkeypatch.setenv("RESIZE_IMAGES_OUTPUT_DIR", str(out_dir))

    assert main(["raw/photo.jpg"]) == 0
    assert _files(out_dir) == ["photo-thumbnail.jpg", "photo.jpg"]


def test_missing_output_dir(workdir, raw_photo):
    assert main(["raw/photo.jpg", "--output-dir", "missing"]) == 1
    assert _files(workdir) == ["raw/photo.jpg"]


def test_non_image_input(workdir, capsys):
    (workdir / "notes.jpg").write_text("hello")
    assert main(["notes.jpg"]) == 1
    assert "Not a recognized image" in capsys.readouterr().out


def test_log_file(workdir, raw_photo):
    assert main(["raw/photo.jpg", "--log-file", "run.log", "--verbose"]) == 0
    log = (workdir / "run.log").read_text(encoding="utf-8")
    assert "resize_images run:" in log
    assert "classified as 3x1" in log
    assert "Wrote photo-thumbnail.jpg: 600×300 JPEG" in log
    assert "Wrote photo.jpg: 1600×800 JPEG" in log


def test_log_file_in_missing_directory(workdir, raw_photo, capsys):
    assert main(["raw/photo.jpg", "--log-file", "nodir/run.log"]) == 1
    assert "Log file directory" in capsys.readouterr().out
    assert _files(workdir) == ["raw/photo.jpg"]


def test_log_file_that_cannot_be_opened(workdir, raw_photo, capsys):
    (workdir / "logs").mkdir()

    # A directory passes the parent check but cannot be opened for writing
    assert main(["raw/photo.jpg", "--log-file", "logs"]) == 1
    assert "Cannot open log file" in capsys.readouterr().out
    assert _files(workdir) == ["raw/photo.jpg"]


def test_parse_override():
    assert parse_override(None) is None
    assert parse_override("1800") == 1800
    assert parse_override("0900") == 900
    for value in ("0", "-5", "12.5", "+10", "abc", ""):
        with pytest.raises(InvalidOverrideError):
            parse_override(value)


def test_parse_args_rejects_unknown_option(workdir, raw_photo):
    with pytest.raises(UsageError):
        parse_args([str(raw_photo), "--quality", "80"])


def test_plan_writes_nothing(workdir, raw_photo):
    from core.resize_runner import ResizeRunner

    result = ResizeRunner("raw/photo.jpg", override_max=1000).plan()

    assert result.category.label == "3x1"
    assert (result.spec.thumbnail_max, result.spec.smaller_max) == (600, 1000)
    assert str(result.outputs.smaller_path) == "photo.jpg"
    assert _files(workdir) == ["raw/photo.jpg"]
