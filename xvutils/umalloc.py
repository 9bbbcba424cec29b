"""A simulated first-fit heap allocator with a circular free list."""

HEADER_SIZE = 16
MIN_GROWTH = 4096  # units requested from the arena at a time
_BASE = -1  # sentinel block, below every arena address


class OutOfMemory(MemoryError):
    """Raised when the arena cannot grow any further."""


class Heap:
    """A heap over a growable arena of at most limit bytes.

    Addresses are byte offsets into the arena; each block carries a
    one-unit header of HEADER_SIZE bytes before the usable space.
    """

    def __init__(self, limit=None):
        self.limit = limit
        self._brk = 0  # arena size in units
        self._size = {}
        self._next = {}
        self._freep = None
        self._allocated = set()

    @property
    def arena_size(self):
        """Bytes obtained from the arena so far."""
        return self._brk * HEADER_SIZE

    def malloc(self, nbytes):
        """Allocate nbytes and return the address of the usable space."""
        if nbytes < 0:
            raise ValueError("negative allocation size")
        nunits = (nbytes + HEADER_SIZE - 1) // HEADER_SIZE + 1
        if self._freep is None:
            self._next[_BASE] = _BASE
            self._size[_BASE] = 0
            self._freep = _BASE
        prevp = self._freep
        p = self._next[prevp]
        while True:
            if self._size[p] >= nunits:
                if self._size[p] == nunits:
                    self._next[prevp] = self._next.pop(p)
                else:
                    self._size[p] -= nunits
                    p += self._size[p]
                    self._size[p] = nunits
                self._freep = prevp
                self._allocated.add(p)
                return (p + 1) * HEADER_SIZE
            if p == self._freep:
                p = self._morecore(nunits)
            prevp, p = p, self._next[p]

    def _morecore(self, nunits):
        nunits = max(nunits, MIN_GROWTH)
        if self.limit is not None and (self._brk + nunits) * HEADER_SIZE > self.limit:
            raise OutOfMemory(f"cannot grow arena by {nunits * HEADER_SIZE} bytes")
        block = self._brk
        self._brk += nunits
        self._size[block] = nunits
        self._release(block)
        return self._freep

    def free(self, address):
        """Return a block obtained from malloc to the free list."""
        unit, rem = divmod(address, HEADER_SIZE)
        block = unit - 1
        if rem or block not in self._allocated:
            raise ValueError(f"address {address} was not allocated")
        self._allocated.remove(block)
        self._release(block)

    def _release(self, bp):
        nxt = self._next
        size = self._size
        p = self._freep
        while not (p < bp < nxt[p]):
            if p >= nxt[p] and (bp > p or bp < nxt[p]):
                break
            p = nxt[p]
        following = nxt[p]
        if bp + size[bp] == following:
            size[bp] += size.pop(following)
            nxt[bp] = nxt.pop(following)
        else:
            nxt[bp] = following
        if p + size[p] == bp:
            size[p] += size.pop(bp)
            nxt[p] = nxt.pop(bp)
        else:
            nxt[p] = bp
        self._freep = p

    def free_blocks(self):
        """Return the free blocks as (header address, size in bytes), by address."""
        if self._freep is None:
            return []
        blocks = []
        p = self._next[_BASE]
        while p != _BASE:
            blocks.append((p * HEADER_SIZE, self._size[p] * HEADER_SIZE))
            p = self._next[p]
        return blocks