"""FauxLedger - simulated finance-document API."""

__version__ = "0.1.0"
