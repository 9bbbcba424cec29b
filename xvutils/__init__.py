"""Unix-style command-line tools, a shell command parser, a simulated heap, and models of a small teaching kernel's memory layout, ELF and virtio structures."""

__version__ = "0.1.0"