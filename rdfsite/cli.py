"""CLI entrypoint for rdfsite."""
from __future__ import annotations
import argparse
import pathlib
import sys

import yaml

from .core.builder import SiteMapBuilder, build_site_config, dump_nav, dump_sidebar
from .core.config_loader import load_site_data
from .core.discovery import compare_with_docs
from .core.emit import FORMATS, render, write
from .core.errors import SiteError
from .core.logging import configure_logging, get_logger
from .core.settings import Settings
from .core.validation import check_site, validate_site


def build_parser():
    p = argparse.ArgumentParser(prog="rdfsite", description="RDF on Elixir documentation site config")
    p.add_argument(
        "--log-dir",
        help="Directory to write log file (rdfsite.log). If not set, only stderr is used.",
    )
    sub = p.add_subparsers(dest="command")

    build = sub.add_parser("build", help="Emit the full site config")
    build.add_argument("--data", help="Site data file (YAML or Python); defaults to the packaged data")
    build.add_argument("--settings", help="Settings YAML merged over the defaults")
    build.add_argument("--format", choices=FORMATS, help="Output format; inferred from --out suffix when omitted")
    build.add_argument("--out", type=pathlib.Path, help="Write to file instead of stdout")

    nav = sub.add_parser("nav", help="Print the nav/sidebar YAML fragment")
    nav.add_argument("--data", help="Site data file (YAML or Python)")

    check = sub.add_parser("check", help="Validate site data")
    check.add_argument("--data", help="Site data file (YAML or Python)")
    check.add_argument("--docs-dir", type=pathlib.Path, help="Also cross-check slugs against markdown files here")
    return p


def _cmd_build(args) -> int:
    data = load_site_data(args.data)
    builder = SiteMapBuilder(data)
    check_site(builder.build_nav(), builder.build_sidebar())
    config = build_site_config(data, Settings(args.settings).load())
    if args.out:
        path = write(config, args.out, args.format)
        get_logger("rdfsite.cli").info("wrote site config to %s", path)
    else:
        sys.stdout.write(render(config, args.format or "json"))
    return 0


def _cmd_nav(args) -> int:
    builder = SiteMapBuilder(load_site_data(args.data))
    fragment = {
        "nav": dump_nav(builder.build_nav()),
        "sidebar": dump_sidebar(builder.build_sidebar()),
    }
    sys.stdout.write(yaml.safe_dump(fragment, sort_keys=False, allow_unicode=True))
    return 0


def _cmd_check(args) -> int:
    data = load_site_data(args.data)
    builder = SiteMapBuilder(data)
    problems = validate_site(builder.build_nav(), builder.build_sidebar())
    if args.docs_dir:
        problems += compare_with_docs(data, args.docs_dir)
    for p in problems:
        print(p)
    if problems:
        return 2
    print(f"ok: {len(data.projects)} section(s)")
    return 0


COMMANDS = {
    "build": _cmd_build,
    "nav": _cmd_nav,
    "check": _cmd_check,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command not in COMMANDS:
        parser.print_help()
        return 1
    # Handlers live on the shared rdfsite logger; module loggers propagate to it
    configure_logging(args.log_dir)
    try:
        return COMMANDS[args.command](args)
    except (SiteError, ValueError) as e:
        get_logger("rdfsite.cli").error("%s", e)
        return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
