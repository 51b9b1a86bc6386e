"""Console script entry point (``greeter``) with production wiring.

Lives outside ``adapters`` so that wiring the composition root into the CLI
does not make the adapters layer depend on composition.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
