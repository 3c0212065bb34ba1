"""
Line-oriented move advisor.

Each input line holds four integers "s0 s1 s2 s3": (s0, s1) are the opponent's
hands and (s2, s3) the hands of the side asking for advice, which is about to
move. The reply keeps the input's pair order, ((s0', s1'), (s2', s3')), or is
None when the advised side has no legal move.
"""

import sys

from games.chopsticks import MAX_FINGERS

NO_MOVE = "None"


class MalformedLineError(ValueError):
    """Raised when an input line is not four hand counts in 0..4."""


def parse_line(line):
    tokens = line.split()
    if len(tokens) != 4:
        raise MalformedLineError(f"expected 4 hand counts, got {len(tokens)}: {line.strip()!r}")
    try:
        counts = [int(token) for token in tokens]
    except ValueError:
        raise MalformedLineError(f"hand counts must be integers: {line.strip()!r}") from None
    for count in counts:
        if not 0 <= count <= MAX_FINGERS:
            raise MalformedLineError(f"hand count {count} outside 0..{MAX_FINGERS}")
    return (counts[0], counts[1]), (counts[2], counts[3])


def format_prediction(state):
    if state is None:
        return NO_MOVE
    return str(state)


def advise(model, state):
    # The advised side is the second pair of the line, so read it as the away side
    return model.predict_reversed(state, deterministic=True)


def serve(model, stdin=None, stdout=None, stderr=None):
    """
    Answer one line per input line until end of input.
    Malformed lines are reported on stderr and skipped.

    Returns:
        Number of lines answered
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    answered = 0
    for line in stdin:
        if not line.strip():
            continue
        try:
            state = parse_line(line)
        except MalformedLineError as e:
            print(f"error: {e}", file=stderr)
            continue
        print(format_prediction(advise(model, state)), file=stdout, flush=True)
        answered += 1
    return answered
