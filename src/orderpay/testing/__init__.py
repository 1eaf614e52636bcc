"""Testing helpers shipped with orderpay."""
