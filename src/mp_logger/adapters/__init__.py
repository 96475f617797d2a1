"""Adapters – third-party I/O clients used by transports."""
