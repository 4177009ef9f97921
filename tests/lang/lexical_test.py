import unittest

from cutelin.lang.lexical import (Assign, CloseScope, Expression, Literal, OpenScope, Print, Statement, VariableRef,
                                  parse_expression, parse_line)
from cutelin.lang.scope import ScopeStack


class ExpressionTestCase(unittest.TestCase):

    def test_parse_expression(self):
        should_pass = {
            "5": Literal("5"),
            "-3": Literal("-3"),
            "+7": Literal("+7"),
            "0": Literal("0"),
            "x": VariableRef("x"),
            "x1": VariableRef("x1"),
            "1x": VariableRef("1x"),
            "-": VariableRef("-"),
            "3.5": VariableRef("3.5"),
            "1_000": VariableRef("1_000"),
            "print": VariableRef("print"),
        }
        for case, expected in should_pass.items():
            self.assertEqual(expected, parse_expression(case), case)

    def test_literal_value(self):
        cases = {"5": 5, "-3": -3, "+7": 7, "007": 7, "123456789012345678901234567890": 123456789012345678901234567890}
        for case, expected in cases.items():
            self.assertEqual(expected, parse_expression(case).value, case)

    def test_evaluate(self):
        scopes = ScopeStack()
        scopes.bind("x", 4)

        self.assertEqual(-2, Literal("-2").evaluate(scopes))
        self.assertEqual(4, VariableRef("x").evaluate(scopes))
        self.assertIsNone(VariableRef("y").evaluate(scopes))

    def test_infer_rejects_multiple_tokens(self):
        self.assertIsNone(Expression.infer("a b"))
        self.assertIsNone(Expression.infer(""))


class StatementTestCase(unittest.TestCase):

    def test_parse_line(self):
        cases = {
            "}": CloseScope("}"),
            "scope {": OpenScope("scope {"),
            "print x": Print("print x"),
            "print 5": Print("print 5"),
            "x = 5": Assign("x = 5"),
            "x = y": Assign("x = y"),
            "x   =\t-3": Assign("x = -3"),
            "print print": Print("print print"),
            "scope = 1": Assign("scope = 1"),
            "print {": Print("print {"),
            "x = 5\n": Assign("x = 5"),
            "print y\r\n": Print("print y"),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse_line(case), case)

    def test_parse_line_invalid(self):
        should_fail = ["", "   ", "\n", "print", "=", "foo bar baz", "x = 5 6", "x == 5", "scope", "scope (", "{",
                       "} }", "print x y", "x 5", "x =", "= 5"]
        for case in should_fail:
            self.assertIsNone(parse_line(case), case)

    def test_parse_line_surrounding_whitespace(self):
        should_fail = ["  x = 1", "x = 1 ", " print x", "print x\t", "} ", "\t}", " scope {", "scope { ", "print ",
                       " = 5", "x = ", "  x   =\t-3  "]
        for case in should_fail:
            self.assertIsNone(parse_line(case), repr(case))

    def test_assign_parts(self):
        stmt = parse_line("counter = -12")
        self.assertEqual("counter", stmt.name)
        self.assertEqual(Literal("-12"), stmt.value)

        stmt = parse_line("a = b")
        self.assertEqual("a", stmt.name)
        self.assertEqual(VariableRef("b"), stmt.value)

    def test_print_parts(self):
        self.assertEqual(Literal("42"), parse_line("print 42").value)
        self.assertEqual(VariableRef("z"), parse_line("print z").value)

    def test_original_expr(self):
        stmt = parse_line("print   x\n")
        self.assertEqual("print x", stmt.expr)
        self.assertEqual("print   x\n", stmt.original_expr)

    def test_equality(self):
        self.assertEqual(Print("print x"), Print("print  x"))
        self.assertNotEqual(Print("print x"), Print("print y"))
        self.assertNotEqual(Literal("5"), VariableRef("5"))
        self.assertEqual(1, len({OpenScope("scope {"), OpenScope("scope  {")}))

    def test_statement_variants(self):
        self.assertEqual([CloseScope, OpenScope, Print, Assign], Statement.__subclasses__())


if __name__ == '__main__':
    unittest.main()
