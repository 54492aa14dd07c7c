import os
import sys

import pytest

from ng39.proc import ProcFlag, proc_exec, proc_rd_io, proc_wait

# Prints its arguments joined by spaces, like a small echo program.
MASARG = "import sys; args = sys.argv[1:]; args and print(' '.join(args))"

FLAGS = [
    0,
    ProcFlag.RD_STDOUT,
    ProcFlag.RD_STDERR,
    ProcFlag.RD_STDOUT | ProcFlag.RD_STDERR,
]


def test_proc_exec_wait_all_flags():
    procs = [
        proc_exec(sys.executable, sys.executable, "-c", MASARG, flags=f)
        for f in FLAGS
    ]
    assert [proc_wait(p) for p in procs] == [0, 0, 0, 0]


def test_arguments_reach_child(capfd):
    proc = proc_exec(sys.executable, sys.executable, "-c", MASARG,
                     "miku", "39")
    assert proc_wait(proc) == 0
    out, _ = capfd.readouterr()
    assert out.strip() == "miku 39"


def test_redirect_stdout_hides_output(capfd):
    proc = proc_exec(sys.executable, sys.executable, "-c", MASARG, "miku",
                     flags=ProcFlag.RD_STDOUT)
    assert proc_wait(proc) == 0
    out, _ = capfd.readouterr()
    assert "miku" not in out


def test_redirect_stderr_hides_errors(capfd):
    script = "import sys; sys.stderr.write('mikumiku')"
    proc = proc_exec(sys.executable, sys.executable, "-c", script,
                     flags=ProcFlag.RD_STDERR)
    assert proc_wait(proc) == 0
    _, err = capfd.readouterr()
    assert "mikumiku" not in err


def test_exit_status_is_returned():
    proc = proc_exec(sys.executable, sys.executable, "-c",
                     "raise SystemExit(39)")
    assert proc_wait(proc) == 39


def test_missing_program_raises():
    with pytest.raises(OSError):
        proc_exec("no-such-program-ng39-test", "no-such-program-ng39-test")


def test_proc_rd_io_stdout(tmp_path):
    target = tmp_path / "out.txt"
    saved = os.dup(1)
    try:
        proc_rd_io(target, ProcFlag.RD_STDOUT)
        os.write(1, b"miku")
    finally:
        os.dup2(saved, 1)
        os.close(saved)
    assert target.read_bytes() == b"miku"


def test_proc_rd_io_truncates_existing(tmp_path):
    target = tmp_path / "out.txt"
    target.write_bytes(b"old content")
    proc_rd_io(target, 0)
    assert target.read_bytes() == b""


def test_proc_rd_io_bad_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        proc_rd_io(tmp_path / "missing" / "out.txt", ProcFlag.RD_STDOUT)