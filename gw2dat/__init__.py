"""Binary structures, entry categorisation, hex dumps and channel toggling for .dat archive contents."""

__version__ = "1.0.9"
__all__ = ["formats", "bits", "scan", "hexview", "channels"]