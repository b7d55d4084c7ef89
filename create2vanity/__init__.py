"""py-create2-vanity — CREATE2 address derivation and vanity salt mining."""

__version__ = "0.1.0"
