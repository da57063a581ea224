"""Fork-versioned beacon block envelopes and block contents codecs."""

__version__ = "0.1.0"
