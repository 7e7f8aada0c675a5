"""
Lint script runner.
"""
import subprocess


def main():
    """
    Lint the calculator sources using flake8 and pylint.
    """
    print("Running flake8...")
    subprocess.run([
        "flake8",
        "./prefixcalc",
        "./calc.py",
        "--max-line-length=100",
        "--exclude=prefixcalc/tests"
    ], check=True)

    print("Running pylint...")
    subprocess.run([
        "pylint",
        "./prefixcalc",
        "./calc.py",
        "--ignore=tests"
    ], check=True)


if __name__ == "__main__":
    main()
