"""Account authentication core for the IP-asset registry backend."""

__version__ = "0.1.0"
