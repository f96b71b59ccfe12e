# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file. Its output feeds the second command. The second command's output
is written to an output file. The result is close to this shell line:

```
< file1 cmd1 | cmd2 > file2
```

## Installation

```
pip install .
```

## Command line

```
pipex <file1> <cmd1> <cmd2> <file2>
```

For example:

```
pipex input.txt "grep hello" "wc -l" output.txt
```

### How commands are handled

- Each command is split on spaces and empty words are dropped. Quoting is not understood.
- The first word is looked up in the directories listed in `PATH`. The first
  `<dir>/<word>` that exists is used. Existence is enough; the execute bit is not checked.
- The output file is created with mode `0777`, which the umask may reduce. If
  the file already exists it is truncated.

### Errors and exit status

A failure in the first stage does not stop the run. This covers an input file
that cannot be opened, a first command that cannot be found, and a first
command that cannot be started. The failure is printed on standard error with
a red `Error` label, and the second command then runs on empty input.

A failure in the second stage is reported the same way, and `pipex` exits with
status 1. This covers an output file that cannot be opened, a second command
that cannot be found, an empty second command, and a `PATH` that is not set.

Otherwise `pipex` exits with the second command's exit status. If that command
was killed by a signal, the status is 128 plus the signal number.

With the wrong number of arguments, `pipex` prints `Error: The expected arguments are:`
on standard error and an example line on standard output. It then exits with
status 0 and does nothing else.

### Limits

The first command runs to completion before the second one starts. Its whole
output is held in memory, so the two commands do not run at the same time.
Only two commands are supported. There are no here-documents and no append mode.

## Library use

```python
import os
from pipex.cli import run_pipeline
from pipex.resolve import PipexError, find_path, resolve_command, split_command

status = run_pipeline("input.txt", "grep hello", "wc -l", "output.txt", dict(os.environ))

try:
    path, args = resolve_command("ls -l", dict(os.environ))
except PipexError as exc:
    print(exc)
```

- `run_pipeline(infile, cmd1, cmd2, outfile, env=None)` runs the pipeline and
  returns the second command's exit status. Second-stage failures raise
  `PipexError`. If `env` is `None`, `os.environ` is used.
- `find_path(cmd, env=None)` returns the first matching path, or `None` if
  nothing matches. It raises `PipexError` when `PATH` is missing.
- `split_command(argument)` returns the words of a command line. It raises
  `PipexError` for an empty command.
- `resolve_command(argument, env=None)` returns `(path, args)`. It raises
  `PipexError` when the command is not found.
- `main(argv=None)` is the command-line entry point and returns the exit status.

The package has three helper modules:

- `pipex.textops` holds text and byte helpers: `atoi`, `itoa`, `memchr`,
  `memcmp`, `split`, `strchr`, `strrchr`, `strmapi`, `strncmp`, `strnstr`,
  `strtrim` and `substr`. The searches return an index, or `None` when nothing is found.
- `pipex.charclass` holds ASCII tests and case conversion: `isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper` and `tolower`. Each
  accepts a one-character string or an integer code.
- `pipex.output` holds stream writers: `putchar`, `putstr`, `putendl` and
  `putnbr`. They write to standard output unless a stream is given.

## Running the tests

```
pip install ".[test]"
pytest
```