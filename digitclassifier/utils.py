"""String splitting and command-line argument count checks."""

_MIN_ARGC = {"h": 2, "r": 4, "g": 4, "a": 2}
_MAX_ARGC = {"h": 4, "r": 6, "g": 6, "a": 2}


def split(s, delim):
    """Split ``s`` on ``delim``; a trailing delimiter yields no empty last item."""
    parts = s.split(delim)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def _algorithm_count(argv):
    try:
        return int(argv[4])
    except ValueError:
        raise ValueError(
            f"number of algorithms must be an integer, got {argv[4]!r}"
        ) from None


def enough_arguments(argv, choice):
    """Tell whether ``argv`` holds enough arguments for command ``choice``."""
    argc = len(argv)
    if choice == "c":
        return argc >= 5 and argc > 4 + _algorithm_count(argv)
    minimum = _MIN_ARGC.get(choice)
    return minimum is not None and argc >= minimum


def not_too_much_arguments(argv, choice):
    """Tell whether ``argv`` stays within the argument limit of ``choice``."""
    argc = len(argv)
    if choice == "c":
        return argc < 5 or argc <= 6 + _algorithm_count(argv)
    maximum = _MAX_ARGC.get(choice)
    return maximum is None or argc <= maximum


def format_all_arguments(argv):
    """Render the arguments given after the command option."""
    lines = [
        "--------PRINT ALL ARGUMENTS--------",
        f"number of arguments = {len(argv) - 2}",
        *argv[2:],
        "-----PRINT ALL ARGUMENTS ENDED-----",
    ]
    return "\n".join(lines)