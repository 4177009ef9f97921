"""Lexical analysis for the cutelin language. Every line of a program is exactly one statement, and statements are
told apart purely by their whitespace-separated tokens:

```
<close_scope> ::= "}"                          ; closes the innermost scope
<open_scope>  ::= "scope" "{"                  ; opens a new, empty scope
<print_stmt>  ::= "print" <r-value>            ; prints the value of <r-value>, or "null" if it is unbound
<assign_stmt> ::= <l-value> "=" <r-value>      ; binds <l-value> in the innermost scope
                                               ; - <l-value> is any token, taken verbatim

<r-value>     ::= <integer>                    ; optional sign followed by decimal digits
                | <name>                       ; any other token, resolved when the statement is evaluated
```

Lines that match none of the above are invalid: parse_line returns None for them and the session reports them.
"""

import re
from abc import abstractmethod, ABC


class Grammar(ABC):
    """Superclass representing any grammar object in the cutelin language."""
    SEPARATOR = re.compile(r"\s+")

    def __init__(self, expr, original_expr=None):
        """Assumes check_grammar has been run."""
        self.expr = Grammar.preprocess(expr)
        self.original_expr = original_expr if original_expr is not None else expr  # used for error messages
        self.tokens = Grammar.tokenize(self.expr)
        self._cls = type(self).__name__

    @staticmethod
    @abstractmethod
    def check_grammar(tokens):
        """This method should return whether or not tokens form this grammar object."""

    @staticmethod
    def tokenize(expr):
        """Splits expr on runs of whitespace, after removing the line terminator. Whitespace before the first token or
        after the last one yields an empty edge token, which no grammar object accepts.
        """
        return Grammar.SEPARATOR.split(expr.rstrip("\r\n"))

    @staticmethod
    def preprocess(expr):
        """Collapses all whitespace runs to a single space and removes the line terminator."""
        return " ".join(Grammar.tokenize(expr))

    @classmethod
    def infer(cls, expr, original_expr=None):
        """Infers the type of expr and returns an object of the matching subclass, or None if no subclass matches.
        Subclasses are tried in the order they are defined in.
        """
        tokens = Grammar.tokenize(expr)
        for subclass in cls.__subclasses__():
            if subclass.check_grammar(tokens):
                return subclass(expr, original_expr if original_expr is not None else expr)
        return None

    def __repr__(self):
        return f"{self._cls}('{self.expr}')"

    def __str__(self):
        return self.expr

    def __eq__(self, other):
        return isinstance(other, type(self)) and other.expr == self.expr

    def __hash__(self):
        return hash((self._cls, self.expr))


class Expression(Grammar):
    """Superclass for r-values: a single token that evaluates to an int, or to None if it cannot be resolved."""

    @abstractmethod
    def evaluate(self, scopes):
        """Evaluates this expression against scopes (a ScopeStack)."""


class Literal(Expression):
    """Integer literal, e.g. '42' or '-3'."""
    INTEGER = re.compile(r"[+-]?[0-9]+")

    def __init__(self, expr, original_expr=None):
        super().__init__(expr, original_expr)
        self.value = int(self.expr)

    @staticmethod
    def check_grammar(tokens):
        return len(tokens) == 1 and Literal.INTEGER.fullmatch(tokens[0]) is not None

    def evaluate(self, scopes):
        return self.value


class VariableRef(Expression):
    """Reference to a variable by name."""

    def __init__(self, expr, original_expr=None):
        super().__init__(expr, original_expr)
        self.name = self.expr

    @staticmethod
    def check_grammar(tokens):
        return len(tokens) == 1 and tokens[0] != ""

    def evaluate(self, scopes):
        return scopes.lookup(self.name)


class Statement(Grammar):
    """Superclass for the four kinds of cutelin statements."""


class CloseScope(Statement):

    @staticmethod
    def check_grammar(tokens):
        return tokens == ["}"]


class OpenScope(Statement):

    @staticmethod
    def check_grammar(tokens):
        return tokens == ["scope", "{"]


class Print(Statement):
    """print <r-value>"""

    def __init__(self, expr, original_expr=None):
        super().__init__(expr, original_expr)
        self.value = Expression.infer(self.tokens[1], self.original_expr)

    @staticmethod
    def check_grammar(tokens):
        return len(tokens) == 2 and tokens[0] == "print" and tokens[1] != ""


class Assign(Statement):
    """<l-value> = <r-value>"""

    def __init__(self, expr, original_expr=None):
        super().__init__(expr, original_expr)
        self.name = self.tokens[0]
        self.value = Expression.infer(self.tokens[2], self.original_expr)

    @staticmethod
    def check_grammar(tokens):
        return len(tokens) == 3 and tokens[1] == "=" and "" not in tokens

    def __repr__(self):
        return f"{self._cls}(name='{self.name}', value={repr(self.value)})"


def parse_expression(token):
    """Returns the Expression token stands for: a Literal if it is a base-10 integer, else a VariableRef."""
    return Expression.infer(token)


def parse_line(line):
    """Returns the Statement line stands for, or None if line is not valid cutelin syntax."""
    return Statement.infer(line)
