"""
CLI Module.

Command-line client built with Typer for the whats-th.is API.

Architecture:
- CLI is a thin presentation layer over owo.api.OwoClient
- Configuration is resolved once in the root callback and handed to
  commands through the Typer context
- Results go to stdout, errors and logs to stderr

Usage:
    owo --help
    owo upload picture.png
    cat notes.txt | owo upload -a
    owo shorten https://example.com
    owo list-files -e 20
    owo delete abc123.png
"""
