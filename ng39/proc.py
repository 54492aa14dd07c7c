"""Start child processes, redirect standard output and wait for exit status."""

import os
import subprocess
import sys
from enum import IntFlag

__all__ = ["ProcFlag", "proc_rd_io", "proc_exec", "proc_wait"]

_STDOUT_FILENO = 1
_STDERR_FILENO = 2


class ProcFlag(IntFlag):
    """Which standard streams to redirect."""

    RD_STDOUT = 1 << 30
    RD_STDERR = 1 << 31


def proc_rd_io(name, flags):
    """Point this process's stdout and/or stderr at the file ``name``.

    The file is created with mode 0664 or truncated if it exists. An
    OSError is raised if it cannot be opened or a stream cannot be
    redirected.
    """
    flags = ProcFlag(flags)
    fd = os.open(
        os.fspath(name), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o664
    )
    try:
        if flags & ProcFlag.RD_STDOUT:
            if sys.stdout is not None:
                sys.stdout.flush()
            os.dup2(fd, _STDOUT_FILENO)
        if flags & ProcFlag.RD_STDERR:
            if sys.stderr is not None:
                sys.stderr.flush()
            os.dup2(fd, _STDERR_FILENO)
    finally:
        os.close(fd)


def proc_exec(file, *args, flags=0):
    """Start ``file`` with the argument vector ``args`` and return the
    process.

    ``args`` includes the program name as its first item; when it is
    empty, ``file`` alone is used. The program is looked up on PATH.
    Streams named in ``flags`` are sent to the null device. An OSError is
    raised if the program cannot be started.
    """
    flags = ProcFlag(flags)
    argv = [os.fspath(a) for a in args] or [os.fspath(file)]
    stdout = subprocess.DEVNULL if flags & ProcFlag.RD_STDOUT else None
    stderr = subprocess.DEVNULL if flags & ProcFlag.RD_STDERR else None

    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()

    return subprocess.Popen(
        argv, executable=os.fspath(file), stdout=stdout, stderr=stderr
    )


def proc_wait(proc):
    """Wait for ``proc`` to finish.

    Returns its exit status, or the number of the signal that ended it.
    """
    code = proc.wait()
    return -code if code < 0 else code