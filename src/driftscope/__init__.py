"""driftscope — reconcile recorded issue locations with the code on disk."""

__version__ = "0.1.0"
