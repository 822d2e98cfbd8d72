"""thinkact: a think/act/observe command-line agent."""

__version__ = "0.1.0"
