"""The Park–Miller minimal standard pseudo-random generator."""

_MASK64 = 0xFFFFFFFFFFFFFFFF


def do_rand(ctx):
    """Return the value following state ctx; it is also the next state.

    Computes (16807 * x) mod (2**31 - 1) without overflow, with the
    state shifted so results lie in [0, 0x7ffffffd].
    """
    x = (ctx & _MASK64) % 0x7FFFFFFE + 1
    hi, lo = divmod(x, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += 0x7FFFFFFF
    return x - 1


class ParkMiller:
    """A generator holding its state between calls."""

    def __init__(self, seed=1):
        self.state = seed & _MASK64

    def next(self):
        self.state = do_rand(self.state)
        return self.state

    def __iter__(self):
        while True:
            yield self.next()