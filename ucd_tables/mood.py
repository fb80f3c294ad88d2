import sys


def stderr_print(*args, **kwargs):
    kwargs.setdefault("file", sys.stderr)
    print(*args, **kwargs)


def silent_print(*args, **kwargs):
    pass


def make_mood_print(quiet):
    return silent_print if quiet else stderr_print
