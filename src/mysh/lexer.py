""" Lexical analysis for shell commands. """


def tokenize(line: str) -> list[str]:
    # No quoting or escaping: any run of whitespace separates two arguments.
    return line.split()
