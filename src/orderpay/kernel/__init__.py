"""orderpay kernel – framework-free building blocks (outcomes, errors, store port, time)."""
