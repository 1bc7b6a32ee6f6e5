"""
owo: whats-th.is client.

- api/: Async HTTP client and response schemas
- cli/: Command-line interface (Typer + Rich)
- core/: Configuration, logging, exceptions, input stream and content sniffing
"""
