"""Physical and virtual memory layout of the emulated RISC-V machine."""

PGSIZE = 4096  # bytes per page
PGSHIFT = 12  # bits of offset within a page

# Sv39 offers 9 + 9 + 9 + 12 bits of address; one bit less is used so
# that addresses never need sign extension.
MAXVA = 1 << (9 + 9 + 9 + 12 - 1)

_MASK64 = 0xFFFFFFFFFFFFFFFF

# qemu puts UART registers here in physical memory.
UART0 = 0x10000000
UART0_IRQ = 10

# virtio mmio interface
VIRTIO0 = 0x10001000
VIRTIO0_IRQ = 1

# core local interruptor (CLINT), which contains the timer.
CLINT = 0x2000000
CLINT_MTIME = CLINT + 0xBFF8  # cycles since boot

# platform-level interrupt controller (PLIC)
PLIC = 0x0C000000
PLIC_PRIORITY = PLIC + 0x0
PLIC_PENDING = PLIC + 0x1000

# RAM used by the kernel and user pages runs from KERNBASE to PHYSTOP.
KERNBASE = 0x80000000
PHYSTOP = KERNBASE + 128 * 1024 * 1024

# the trampoline page sits at the highest address in both address spaces.
TRAMPOLINE = MAXVA - PGSIZE

# the trap frame sits just beneath the trampoline in user space.
TRAPFRAME = TRAMPOLINE - PGSIZE


def clint_mtimecmp(hartid):
    """Address of the timer compare register of a hart."""
    return CLINT + 0x4000 + 8 * hartid


def plic_menable(hart):
    """Machine-mode interrupt enable bits of a hart."""
    return PLIC + 0x2000 + hart * 0x100


def plic_senable(hart):
    """Supervisor-mode interrupt enable bits of a hart."""
    return PLIC + 0x2080 + hart * 0x100


def plic_mpriority(hart):
    """Machine-mode priority threshold of a hart."""
    return PLIC + 0x200000 + hart * 0x2000


def plic_spriority(hart):
    """Supervisor-mode priority threshold of a hart."""
    return PLIC + 0x201000 + hart * 0x2000


def plic_mclaim(hart):
    """Machine-mode claim/complete register of a hart."""
    return PLIC + 0x200004 + hart * 0x2000


def plic_sclaim(hart):
    """Supervisor-mode claim/complete register of a hart."""
    return PLIC + 0x201004 + hart * 0x2000


def kstack(p):
    """Virtual address of process slot p's kernel stack.

    Each stack lies beneath the trampoline with an invalid guard page below it.
    """
    return TRAMPOLINE - (p + 1) * 2 * PGSIZE


def pg_round_up(addr):
    """Round addr up to a page boundary (wrapping like a 64-bit word)."""
    return ((addr + PGSIZE - 1) & _MASK64) & ~(PGSIZE - 1)


def pg_round_down(addr):
    """Round addr down to a page boundary."""
    return (addr & _MASK64) & ~(PGSIZE - 1)