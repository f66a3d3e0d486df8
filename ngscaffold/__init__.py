"""ngscaffold -- generate Angular form applications from a UI specification."""

__version__ = "0.1.0"
