"""Run 'infile | cmd1 | cmd2 > outfile' the way a shell would."""

import os
import subprocess
import sys
from typing import Mapping, Optional, Sequence

from .resolve import PipexError, resolve_command

ERROR_LABEL = "\033[31mError\033[0m"
FILE_PERMISSIONS = 0o777


def _report(exc: Exception) -> None:
    print(f"{ERROR_LABEL}: {exc}", file=sys.stderr)


def _from_os_error(exc: OSError) -> PipexError:
    return PipexError(exc.strerror or str(exc))


def _first_stage(infile: str, cmd1: str, env: Mapping[str, str]) -> bytes:
    """Run cmd1 on infile and return its output; failures are reported, not raised."""
    try:
        with open(infile, "rb") as source:
            path, args = resolve_command(cmd1, env)
            done = subprocess.run(
                args,
                executable=path,
                env=dict(env),
                stdin=source,
                stdout=subprocess.PIPE,
                check=False,
            )
    except OSError as exc:
        _report(_from_os_error(exc))
        return b""
    except PipexError as exc:
        _report(exc)
        return b""
    return done.stdout


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Feed infile through cmd1 then cmd2, writing the result to outfile.

    A failure in the first stage is reported on stderr and the second stage
    runs on empty input. Failures of the second stage raise PipexError.
    Returns the exit status of the second command.
    """
    environment = os.environ if env is None else env
    data = _first_stage(infile, cmd1, environment)
    try:
        fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_PERMISSIONS)
    except OSError as exc:
        raise _from_os_error(exc) from exc
    with os.fdopen(fd, "wb") as sink:
        path, args = resolve_command(cmd2, environment)
        try:
            done = subprocess.run(
                args,
                executable=path,
                env=dict(environment),
                input=data,
                stdout=sink,
                check=False,
            )
        except OSError as exc:
            raise _from_os_error(exc) from exc
    code = done.returncode
    return 128 - code if code < 0 else code


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: pipex <file1> <cmd1> <cmd2> <file2>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write("Error: The expected arguments are:\n")
        sys.stdout.write("Ex.: ./pipex <file1> <cmd1> <cmd2> <file2>\n")
        return 0
    infile, cmd1, cmd2, outfile = args
    try:
        return run_pipeline(infile, cmd1, cmd2, outfile, None)
    except PipexError as exc:
        _report(exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())