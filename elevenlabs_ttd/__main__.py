"""Module entrypoint for running the CLI as ``python -m elevenlabs_ttd``."""

from __future__ import annotations

from elevenlabs_ttd.cli import main


if __name__ == "__main__":
    main()
