"""Tests for the command-line interface.

WHY: The CLI is the operator-facing entry point. It must wire the full
pipeline together, save outputs with predictable names, and report every
failure as the matching exit status.

HOW: Essence files with JSON sidecars are written to tmp_path and
``main()`` is invoked with an explicit argv. SystemExit carries the
status.
"""

import json

import pytest

from dcp_packager.cli import _resolve_output_path, build_parser, main
from dcp_packager.core.errors import ErrorCode
from dcp_packager.core.ir import Callbacks, ProgressCallback


def _run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.fixture
def reel_args(essence_file):
    pic = essence_file("pic.mxf", duration=240)
    snd = essence_file("snd.mxf", essence_type="PCM_24B_48K", duration=250)
    return ["--reel", str(pic), str(snd)]


class TestParser:

    def test_reel_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_multiple_reels_are_grouped(self):
        args = build_parser().parse_args(["--reel", "a", "b", "--reel", "c"])
        assert args.reel == [["a", "b"], ["c"]]

    def test_log_level_is_case_insensitive(self):
        args = build_parser().parse_args(["--reel", "a", "--log-level", "debug"])
        assert args.log_level == "DEBUG"


class TestSuccessfulBuild:

    def test_writes_all_outputs(self, tmp_path, reel_args):
        status = _run(reel_args + ["--basename", "show1", "--output-dir", str(tmp_path)])
        assert status == ErrorCode.NO_ERROR
        assert (tmp_path / "show1-manifest.json").is_file()
        assert (tmp_path / "show1-summary.txt").is_file()

    def test_manifest_contents(self, tmp_path, reel_args):
        _run(reel_args + ["--basename", "show1", "--title", "Feature One",
                          "--formats", "manifest_json", "--output-dir", str(tmp_path)])
        data = json.loads((tmp_path / "show1-manifest.json").read_text(encoding="utf-8"))
        cpl = data["pkls"][0]["cpls"][0]
        assert data["pkls"][0]["filename"] == "PKL_show1.xml"
        assert cpl["filename"] == "CPL_show1.xml"
        assert cpl["title"] == "Feature One"
        assert cpl["reels"][0]["main_sound"]["duration"] == 240
        assert not (tmp_path / "show1-summary.txt").exists()

    def test_stem_defaults_to_pkl_uuid(self, tmp_path, reel_args):
        _run(reel_args + ["--formats", "summary_text", "--output-dir", str(tmp_path)])
        outputs = list(tmp_path.glob("*-summary.txt"))
        assert len(outputs) == 1
        assert len(outputs[0].name) == len("-summary.txt") + 36

    def test_file_done_fires_per_saved_file(self, tmp_path, reel_args):
        seen = []
        callbacks = Callbacks(file_done=ProgressCallback(seen.append, "saved"))
        with pytest.raises(SystemExit) as exc_info:
            main(reel_args + ["--output-dir", str(tmp_path)], callbacks=callbacks)
        assert exc_info.value.code == ErrorCode.NO_ERROR
        saved = list(tmp_path.glob("*-manifest.json")) + list(tmp_path.glob("*-summary.txt"))
        assert len(saved) == 2
        assert seen == ["saved"] * len(saved)

    def test_second_run_does_not_overwrite(self, tmp_path, reel_args):
        argv = reel_args + ["--basename", "show1", "--formats", "summary_text",
                            "--output-dir", str(tmp_path)]
        _run(argv)
        _run(argv)
        assert (tmp_path / "show1-summary.txt").is_file()
        assert (tmp_path / "show1-summary-2.txt").is_file()


class TestFailures:

    def test_missing_file(self, tmp_path):
        status = _run(["--reel", str(tmp_path / "nope.mxf"), "--output-dir", str(tmp_path)])
        assert status == ErrorCode.FILEOPEN

    def test_reel_without_picture(self, tmp_path, essence_file):
        snd = essence_file("snd.mxf", essence_type="PCM_24B_48K")
        status = _run(["--reel", str(snd), "--output-dir", str(tmp_path)])
        assert status == ErrorCode.NO_PICTURE_TRACK

    def test_mixed_namespaces(self, tmp_path, essence_file):
        pic = essence_file("pic.mxf", namespace="SMPTE")
        snd = essence_file("snd.mxf", essence_type="PCM_24B_48K", namespace="INTEROP")
        status = _run(["--reel", str(pic), str(snd), "--output-dir", str(tmp_path)])
        assert status == ErrorCode.SPECIFICATION_MISMATCH

    def test_invalid_kind_is_fatal(self, tmp_path, reel_args):
        status = _run(reel_args + ["--kind", "documentary", "--output-dir", str(tmp_path)])
        assert status == ErrorCode.FATAL

    def test_unknown_format(self, tmp_path, reel_args):
        status = _run(reel_args + ["--formats", "xml", "--output-dir", str(tmp_path)])
        assert status == ErrorCode.ERROR

    def test_missing_output_dir(self, tmp_path, reel_args):
        status = _run(reel_args + ["--output-dir", str(tmp_path / "absent")])
        assert status == ErrorCode.ERROR


class TestOutputPath:

    def test_free_name(self, tmp_path):
        assert _resolve_output_path("pkg", "-manifest.json", tmp_path) == tmp_path / "pkg-manifest.json"

    def test_numbered_on_conflict(self, tmp_path):
        (tmp_path / "pkg-manifest.json").touch()
        (tmp_path / "pkg-manifest-2.json").touch()
        assert _resolve_output_path("pkg", "-manifest.json", tmp_path) == tmp_path / "pkg-manifest-3.json"
