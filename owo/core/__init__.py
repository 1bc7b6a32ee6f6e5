"""Core infrastructure: configuration, logging, exceptions, streams, sniffing."""
