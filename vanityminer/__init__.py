"""Vanity address salt mining for CREATE2, CreateX CREATE3, Uniswap v4 hook and EulerSwap deployments."""

__version__ = "0.1.0"