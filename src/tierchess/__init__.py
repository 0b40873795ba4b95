"""tierchess: chess rules with the self-capture-and-transform variant and a
shallow minimax opponent."""

__version__ = "0.1.0"
