import sys
from typing import Optional, Sequence


def forwarded_args(argv: Optional[Sequence[str]] = None) -> list[str]:
    """
    Arguments to hand over to the delegate, program name excluded.

    Nothing is parsed here: every token, `--help` included, belongs to the delegate.
    """
    if argv is None:
        argv = sys.argv[1:]
    return list(argv)
