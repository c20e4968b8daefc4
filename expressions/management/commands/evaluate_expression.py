"""
Management command to build, print and evaluate one arithmetic expression.

Prints, in order:
- Infix rendering
- Prefix rendering
- Postfix rendering
- The evaluated value
"""
import logging
import sys

from django.core.management.base import BaseCommand, CommandError

from expressions.conf import get_setting
from expressions.tree import ExpressionError, ExpressionTree
from expressions.tree.nodes import is_variable

logger = logging.getLogger(__name__)


def parse_variable(pair):
    """Split a NAME=VALUE option into (name, float value)."""
    name, sep, raw = pair.partition("=")
    name = name.strip()
    if not sep or not is_variable(name):
        raise CommandError(f"Invalid --var '{pair}', expected NAME=VALUE")
    try:
        return name, float(raw)
    except ValueError:
        raise CommandError(f"Invalid value for variable '{name}': '{raw}'")


class Command(BaseCommand):
    help = "Build an expression tree from a fully parenthesized expression, print it and evaluate it"
    stealth_options = ("stdin",)

    def add_arguments(self, parser):
        parser.add_argument(
            "expression", nargs="?",
            help="Expression such as '((3+4)*2)'. Read from standard input when omitted.",
        )
        parser.add_argument(
            "--strict", action="store_true", default=None,
            help="Report malformed input instead of dropping the malformed parts",
        )
        parser.add_argument(
            "--strict-division", action="store_true", default=None,
            help="Fail on division by zero instead of printing inf/nan",
        )
        parser.add_argument(
            "--var", action="append", default=[], metavar="NAME=VALUE",
            help="Value for a variable used in the expression (repeatable)",
        )

    def handle(self, *args, **options):
        expression = options["expression"]
        if expression is None:
            stdin = options.get("stdin") or sys.stdin
            self.stdout.write("Enter arithmetic expression: ", ending="")
            self.stdout.flush()
            expression = stdin.readline().rstrip("\n")

        max_length = get_setting("MAX_LENGTH")
        if len(expression) > max_length:
            raise CommandError(f"Expression must be at most {max_length} characters")

        variables = dict(parse_variable(pair) for pair in options["var"])
        strict = options["strict"] if options["strict"] is not None else get_setting("STRICT")
        strict_division = options["strict_division"]
        if strict_division is None:
            strict_division = get_setting("STRICT_DIVISION")

        try:
            tree = ExpressionTree.from_string(
                expression, variables=variables, strict=strict, strict_division=strict_division
            )
            lines = tree.render()
        except ExpressionError as e:
            logger.warning(f"Rejected expression '{expression}': {e}")
            raise CommandError(str(e))

        for line in lines:
            self.stdout.write(line)
