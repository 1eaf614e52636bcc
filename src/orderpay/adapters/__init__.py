"""Adapters – concrete implementations of the orderpay ports."""
