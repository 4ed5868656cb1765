import sys

VERBOSE = False

def set_verbose(verbose: bool) -> None:
    global VERBOSE
    VERBOSE = verbose

def print_(*args, **kwargs) -> None:
    """Print progress output, only when VERBOSE is enabled."""
    if VERBOSE:
        print(*args, **kwargs)

def print_error(message: str) -> None:
    print(f"ERROR {message}", file=sys.stderr)
