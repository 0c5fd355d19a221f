"""pagegate - page/action permission engine for the station management portal."""

__version__ = "0.1.0"
