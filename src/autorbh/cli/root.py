from autorbh.cli import program
# Importing the command modules registers their sub-parsers
from autorbh.cli import besthits, extract, reciprocal


def run(argv=None):
    program.run(argv)


if __name__ == "__main__":
    run()
