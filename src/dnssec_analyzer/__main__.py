"""Entry point for dnssec-analyzer."""

from dnssec_analyzer.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
