import pytest

from timemachinelogs.cli import build_parser, main


def _make_tree(root, files):
    for rel, data in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)


FILES = {
    "log1.txt": b"first line\n",
    "copy/log1.txt": b"first line\n",
    "other/log2.txt": b"second\n",
}


def test_parser_reads_short_and_long_options():
    args = build_parser().parse_args(["-m", "pack", "--input", "in", "-o", "out"])
    assert (args.mode, args.input, args.output) == ("pack", "in", "out")


def test_missing_arguments_fail(capsys):
    assert main(["--mode", "pack"]) == 1
    err = capsys.readouterr().err
    assert "Missing required arguments" in err
    assert "Use --help for more information" in err


def test_invalid_mode_fails(tmp_path, capsys):
    assert main(["-m", "shuffle", "-i", str(tmp_path), "-o", str(tmp_path / "a")]) == 1
    assert "Invalid mode" in capsys.readouterr().err


def test_pack_then_unpack_round_trip(tmp_path):
    source = tmp_path / "src"
    _make_tree(source, FILES)
    archive = tmp_path / "logs.tml"
    restored = tmp_path / "restored"

    assert main(["--mode", "pack", "--input", str(source), "--output", str(archive)]) == 0
    assert archive.is_file()
    assert main(["-m", "unpack", "-i", str(archive), "-o", str(restored)]) == 0
    for rel, data in FILES.items():
        assert (restored / rel).read_bytes() == data


def test_mode_is_case_insensitive(tmp_path):
    source = tmp_path / "src"
    _make_tree(source, {"a": b"1"})
    archive = tmp_path / "a.tml"
    assert main(["-m", "PACK", "-i", str(source), "-o", str(archive)]) == 0
    assert archive.stat().st_size > 0


def test_pack_of_missing_directory_reports_exception(tmp_path, capsys):
    status = main(["-m", "pack", "-i", str(tmp_path / "nope"), "-o", str(tmp_path / "a")])
    assert status == 0
    err = capsys.readouterr().err
    assert "Invalid directory" in err
    assert not (tmp_path / "a").exists()


def test_pack_into_directory_fails(tmp_path, capsys):
    source = tmp_path / "src"
    _make_tree(source, {"a": b"1"})
    assert main(["-m", "pack", "-i", str(source), "-o", str(tmp_path)]) == 1
    assert "Failed to pack the archive" in capsys.readouterr().err


def test_unpack_of_missing_archive_fails(tmp_path, capsys):
    status = main(["-m", "unpack", "-i", str(tmp_path / "x.tml"), "-o", str(tmp_path / "o")])
    assert status == 1
    assert "Failed to unpack the archive" in capsys.readouterr().err


def test_version_option(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "Time Machine Logs 1.0" in capsys.readouterr().out