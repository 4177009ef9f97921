"""Runs the cutelin interpreter over a program file, a pipe or an interactive terminal. Also uses error handling context
manager. Called from the cutelin console script.

Python version must be >=3.7, because error handling requires that dicts are insertion-ordered.
"""

import argparse
import sys

from cutelin import BANNER
from cutelin.lang.error import ErrorHandler
from cutelin.lang.session import Session
from cutelin.lang.shell import Shell


def main(argv=None):
    """Runs cutelin interpreter. Called from cutelin console script."""
    assert sys.version_info >= (3, 7), "cutelin cannot be run with python < 3.7"

    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="cutelin")
        parser.add_argument("file", help="file to interpret and run (if empty, reads standard input)", nargs="?")
        parser.add_argument("-w", "--warn", action="store_true", help="warn when an unbound variable is read")
        parser.add_argument("-q", "--quiet", action="store_true", help="do not print the startup banner")
        args = parser.parse_args(argv)

        if args.file is None and sys.stdin.isatty():
            shell = Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, warn=args.warn))
            if args.quiet:
                shell.intro = None
            shell.cmdloop()

        else:
            if not args.quiet:
                print(BANNER, flush=True)

            path = args.file if args.file is not None else Session.SH_FILE
            Session(error_handler, path, cmd_line=False, warn=args.warn).run()


if __name__ == "__main__":
    main()
