"""Session control for the cutelin language. Evaluates parsed statements against a scope stack and streams program output,
either from a program file or from standard input.
"""

import sys

from cutelin.lang.error import GenericException
from cutelin.lang.lexical import Assign, CloseScope, OpenScope, Print, VariableRef, parse_line
from cutelin.lang.scope import ScopeStack


class Session:
    """Governs a cutelin session: owns the scope stack and evaluates one line at a time."""
    SH_FILE = "<stdin>"               # pseudo-path for standard input
    INVALID_SYNTAX = "Invalid syntax"  # output for lines that are not valid statements
    UNBOUND = "null"                  # output for printing a name that is not bound in any visible scope

    def __init__(self, error_handler, path=SH_FILE, cmd_line=False, warn=False):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in interactive mode
        self.warn = warn          # whether or not to warn about unbound names

        self.scopes = ScopeStack()
        self.line_num = 0

        if self.cmd_line:
            self.error_handler.fatal = False

    def add(self, line):
        """Parses and evaluates a single line, returning its output line (without newline) or None."""
        line = line.rstrip("\r\n")
        self.line_num += 1
        self.error_handler.register_line(self.path, line, self.line_num)  # in case error is raised

        result = self.evaluate(parse_line(line))

        self.error_handler.remove_line(self.path)  # error was not raised
        return result

    def evaluate(self, stmt):
        """Evaluates stmt (None for an invalid line). Raises ScopeUnderflow if stmt closes the global scope."""
        if stmt is None:
            return Session.INVALID_SYNTAX

        elif isinstance(stmt, Assign):
            value = self._resolve(stmt.value)
            if value is not None:
                self.scopes.bind(stmt.name, value)

        elif isinstance(stmt, Print):
            value = self._resolve(stmt.value)
            return Session.UNBOUND if value is None else str(value)

        elif isinstance(stmt, OpenScope):
            self.scopes.push()

        elif isinstance(stmt, CloseScope):
            self.scopes.pop(stmt.original_expr)

        return None

    def _resolve(self, expr):
        value = expr.evaluate(self.scopes)
        if value is None and self.warn and isinstance(expr, VariableRef):
            msg = "'{}' is not bound in any visible scope"
            self.error_handler.warn(msg, expr.name)
        return value

    def interpret(self, istream, ostream):
        """Evaluates every line of istream in order, writing and flushing each output line to ostream as soon as it is
        produced. Stops at end of istream; ScopeUnderflow and I/O errors propagate.
        """
        for line in istream:
            result = self.add(line)
            if result is not None:
                ostream.write(result + "\n")
                ostream.flush()

    def run(self, ostream=None):
        """Runs this session's program: standard input if path is SH_FILE, otherwise the file at path."""
        if ostream is None:
            ostream = sys.stdout

        if self.path == Session.SH_FILE:
            self.interpret(sys.stdin, ostream)
            return

        try:
            file = open(self.path, "r", encoding="utf-8", errors="replace")
        except OSError:
            raise GenericException("'{}' could not be opened", self.path, diagnosis=False)

        with file:
            self.interpret(file, ostream)
