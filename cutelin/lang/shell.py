"""Handles interactive/command-line mode for the cutelin interpreter. Uses cmd as backend."""

import cmd

from cutelin import BANNER


class Shell(cmd.Cmd):
    """Cutelin interpreter shell. Every line is a cutelin statement: there are no shell commands, and only the end of
    input exits.
    """
    intro = BANNER
    prompt = "> "  # written to the shell's stdout, before each line is read

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess

    def cmdloop(self, intro=None):
        """Same loop as cmd.Cmd.cmdloop, except that end of input is told apart from a line reading 'EOF'."""
        self.preloop()
        if intro is not None:
            self.intro = intro
        if self.intro:
            self.stdout.write(str(self.intro) + "\n")

        stop = None
        while not stop:
            line = self.readline()
            if line is None:
                stop = self.do_EOF("")
            else:
                line = self.precmd(line)
                stop = self.postcmd(self.onecmd(line), line)
        self.postloop()

    def readline(self):
        """Prompts for and returns the next line without its terminator, or None at end of input."""
        if self.use_rawinput:
            try:
                return input(self.prompt)
            except EOFError:
                return None

        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        return line.rstrip("\r\n") if line else None

    def parseline(self, line):
        """Never splits off a command name, so that lines like 'help = 1' or 'EOF' reach default untouched."""
        return None, None, line

    def default(self, line):
        """Executes a single cutelin statement."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            result = self.sess.add(line)
            if result is not None:
                self.stdout.write(result + "\n")
                self.stdout.flush()

    def emptyline(self):
        """Empty lines are invalid statements, not repetitions of the previous one."""
        return self.default("")

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.stdout.write("\n")
        return True
