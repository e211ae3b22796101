## args.py  (argparse only)
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, List, Optional, Sequence, Tuple

# Value given to a flag that appears without one, e.g. a trailing "--baseline"
BARE_FLAG = ""

VALUE_FLAGS = ("--current", "--baseline", "--out", "--config", "--log-level")
FALSE_VALUES = ("", "0", "false", "no", "off")


@dataclass(frozen=True)
class CompareArgs:
    current: Optional[Path]
    baseline: Optional[Path]
    out: Optional[Path]
    config: Optional[str]
    log_level: Optional[str]
    serve: bool
    # flags given with no value; a bare --baseline switches off the INI baseline
    cleared: FrozenSet[str] = frozenset()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lh-compare",
        description="Summarize a Lighthouse JSON result, optionally against a baseline run.",
        allow_abbrev=False,
    )
    p.add_argument("--current", nargs="?", const=BARE_FLAG, default=None, help="Lighthouse JSON for this run")
    p.add_argument("--baseline", nargs="?", const=BARE_FLAG, default=None, help="Lighthouse JSON to compare against")
    p.add_argument("--out", nargs="?", const=BARE_FLAG, default=None, help="Markdown output path")
    p.add_argument("--config", nargs="?", const=BARE_FLAG, default=None, help="INI file with defaults")
    p.add_argument("--log-level", dest="log_level", nargs="?", const=BARE_FLAG, default=None, help="DEBUG, INFO, WARNING, ...")
    p.add_argument("--serve", nargs="?", const="yes", default=None, help="Run the Flask preview server instead")
    return p


def _attach_values(argv: Sequence[str]) -> List[str]:
    """
    Binds the token after a value flag to it unless that token is another "--" flag,
    so values such as "-report.md" are not mistaken for options.
    """
    out: List[str] = []
    i = 0
    while i < len(argv):
        token = argv[i]
        nxt = argv[i + 1] if i + 1 < len(argv) else None
        if token in VALUE_FLAGS and nxt is not None and not nxt.startswith("--"):
            out.append(f"{token}={nxt}")
            i += 2
            continue
        out.append(token)
        i += 1
    return out


def _opt_path(raw: Optional[str]) -> Optional[Path]:
    raw = (raw or "").strip()
    return Path(raw) if raw else None


def parse_args(argv: Optional[Sequence[str]] = None) -> Tuple[CompareArgs, List[str]]:
    """
    Returns the typed arguments plus whatever tokens were not recognized.
    Unknown flags are never an error.
    """
    ns, unknown = build_parser().parse_known_args(_attach_values(sys.argv[1:] if argv is None else argv))

    args = CompareArgs(
        current=_opt_path(ns.current),
        baseline=_opt_path(ns.baseline),
        out=_opt_path(ns.out),
        config=(ns.config or "").strip() or None,
        log_level=(ns.log_level or "").strip().upper() or None,
        serve=ns.serve is not None and ns.serve.strip().lower() not in FALSE_VALUES,
        cleared=frozenset(k for k in ("current", "baseline", "out") if getattr(ns, k) == BARE_FLAG),
    )
    return args, unknown
