"""orderpay application layer – commands, recorders, services and consumers."""
