"""
Prefix Calculator

This is the main entry point for the prefix arithmetic calculator.

Workflow:
1. A line is read from the prompt, from ``--expr`` or from a file.
2. The Lexer tokenizes the line into numbers, operators and parentheses.
3. The Parser builds an expression tree from the tokens.
4. The Interpreter walks the tree and prints the integer result.

Errors are printed and the next line is processed as usual.
"""
import argparse
import sys

from prefixcalc.runner import debug_enabled, run_line, run_lines

PROMPT = "user input> "


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser.
    """
    parser = argparse.ArgumentParser(
        prog="prefixcalc",
        description="Evaluate fully-parenthesized prefix integer arithmetic, e.g. (+ 1 (* 2 3)).",
        epilog="Run with no arguments to enter interactive mode (REPL).",
        allow_abbrev=False,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Path to a file with one expression per line",
    )
    source.add_argument(
        "-e", "--expr",
        default=None,
        help="Evaluate a single expression and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print tokens and expression tree before evaluating "
             "(also enabled by PREFIXCALC_DEBUG=1)",
    )
    return parser


def run_expr(expr: str, debug: bool = False) -> int:
    """
    Evaluate a single expression and print the result.
    """
    result = run_line(expr, debug)
    output = result.describe()
    if output:
        print(output)
    return 0 if result.ok else 1


def run_script(script_name: str, debug: bool = False) -> int:
    """
    Evaluate every line of a file
    """
    try:
        # Undecodable bytes reach the lexer and fail only their own line
        with open(script_name, "r", encoding="utf-8", errors="surrogateescape") as f:
            lines = f.readlines()
    except OSError as e:
        print(f"{type(e).__name__}: {e}")
        return 1

    status = 0
    for lineno, result in run_lines(lines, debug):
        output = result.describe()
        if not result.ok:
            status = 1
            output = f"line {lineno}: {output}"
        if output:
            print(output)
    return status


def run_repl(debug: bool = False):
    """
    Run the interactive REPL
    """
    print("Prefix Calculator - REPL")
    print("Type `exit` or `quit` to leave.")
    while True:
        try:
            line = input(PROMPT)
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break
        except UnicodeDecodeError as e:
            print(f"{type(e).__name__}: {e}")
            continue
        if line.strip() in {"exit", "quit"}:
            break
        if not line.strip():
            continue
        output = run_line(line, debug).describe()
        if output:
            print(output)


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - ``-e EXPR``: evaluate one expression.
    - A path: evaluate each non-blank line of the file.

    Returns 0 when every evaluated line succeeded, 1 otherwise.
    """
    try:
        args = build_arg_parser().parse_args(argv[1:])
    except SystemExit as e:
        return 0 if e.code == 0 else 1

    debug = args.debug or debug_enabled()
    if args.expr is not None:
        return run_expr(args.expr, debug)
    if args.file is not None:
        return run_script(args.file, debug)
    run_repl(debug)
    return 0


def run() -> None:
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
