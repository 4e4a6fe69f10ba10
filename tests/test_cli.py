import os

from tmpkit.cli.commands import main


def test_file_command(tmp_path, capsys):
    root = tmp_path / "root"
    assert main(["--root", str(root), "file", "--extension", "png"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith(str(root))
    assert out.endswith(".png")


def test_directory_command(tmp_path, capsys):
    assert main(["--root", str(tmp_path), "directory"]) == 0
    assert os.path.isdir(capsys.readouterr().out.strip())


def test_write_command(tmp_path, capsys):
    assert main(["--root", str(tmp_path), "write", "unicorn", "--name", "a.txt"]) == 0
    path = capsys.readouterr().out.strip()
    with open(path) as fh:
        assert fh.read() == "unicorn"


def test_conflicting_options_fail(tmp_path, capsys):
    assert main(["--root", str(tmp_path), "file", "--name", "a.md", "--extension", "md"]) == 1
    assert "mutually exclusive" in capsys.readouterr().out
