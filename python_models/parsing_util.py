import re

class InputError(ValueError):
    pass

def readinputs(fn, raw=False):
    with open(fn, "r") as f:
        if raw:
            return f.read()
        else:
            return [x.strip() for x in f.readlines()]

def parse_count(token, what="blink count"):
    # No signs, no partial matches
    token = token.strip()
    if re.fullmatch(r'\d+', token):
        return int(token)

    if re.fullmatch(r'-\d+', token):
        raise InputError(f"{what} must be non-negative, got {token}")
    raise InputError(f"{what} must be a non-negative integer, got {token!r}")

def parse_stones(tokens):
    return [parse_count(t, what="stone") for t in tokens]

def readstones(fn):
    # Whitespace separated stones, possibly over several lines
    return parse_stones(readinputs(fn, raw=True).split())
