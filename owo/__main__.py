"""Allow `python -m owo`."""

from owo.cli.main import app

if __name__ == "__main__":
    app(prog_name="owo")
