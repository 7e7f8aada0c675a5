"""
Utility functions shared across prefix calculator tests.
"""
from pathlib import Path
import sys

from prefixcalc.lexer import tokenize
from prefixcalc.parser import Parser
from prefixcalc.interpreter import Interpreter

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def parse_source(source: str):
    """
    Tokenize and parse source text and return the tree.
    """
    return Parser(tokenize(source)).parse()


def eval_source(source: str):
    """
    Run source text through the whole pipeline and return the value.
    """
    return Interpreter().eval_expr(parse_source(source))
