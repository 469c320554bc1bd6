"""cw20kit — message contract and creation-request validation for CW20 tokens."""

__version__ = "0.1.0"
