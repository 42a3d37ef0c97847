"""One-hand UNO rules engine with a match sequencer and simulation CLI."""

__version__ = "0.1.0"
