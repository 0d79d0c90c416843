"""cd-engine -- command-line scaffolding for Angular UI components."""

__version__ = "1.0.0"
