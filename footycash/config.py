"""
Startup options read from the command line
"""
import argparse
from dataclasses import dataclass
from typing import Optional, Sequence

__all__ = ["StartupOptions", "build_parser", "parse_args"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class StartupOptions:
    testnet: bool = False
    log_level: str = "INFO"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="footycashd", description="FootyCash node network parameters")
    p.add_argument("-testnet", "--testnet", action="store_true", help="Use the test network")
    p.add_argument("--log-level", default="INFO", type=str.upper, choices=LOG_LEVELS)
    return p


def parse_args(argv: Optional[Sequence[str]] = None) -> StartupOptions:
    # Unknown options belong to other subsystems
    args, _ = build_parser().parse_known_args(argv)
    return StartupOptions(testnet=args.testnet, log_level=args.log_level)
