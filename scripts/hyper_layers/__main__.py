"""CLI entry point for hyper_layers package.

Usage:
    python -m hyper_layers compile -i layers.yaml -o hyper.json
    python -m hyper_layers variables -i layers.yaml
    python -m hyper_layers keys
"""

from .cli import main

if __name__ == "__main__":
    main()
