"""Command-line interface for jsxtree."""

from __future__ import annotations

import argparse
import functools
import logging
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jsxtree.errors import MarkdownConversionFailure, ParseFailure, TranslationError

if TYPE_CHECKING:
    from jsxtree.cache import TranslationCache

MARKDOWN_SUFFIXES = (".md", ".markdown")
EMIT_FORMATS = ("tree", "html")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    markdown: bool
    single: bool
    emit: str
    extensions: list[str]
    features: str
    watch: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="jsxtree",
        description="Translate HTML or Markdown into a typed element tree",
    )
    p.add_argument("input", help="Input .html or .md file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    kind = p.add_mutually_exclusive_group()
    kind.add_argument("--markdown", action="store_true", help="Treat input as Markdown")
    kind.add_argument("--html", action="store_true", help="Treat input as HTML")
    p.add_argument(
        "--single",
        action="store_true",
        help="Require exactly one top-level element",
    )
    p.add_argument(
        "--emit",
        choices=EMIT_FORMATS,
        default=None,
        help="Output format (default: tree)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover jsxtree.toml)",
    )
    p.add_argument(
        "-x",
        "--extension",
        action="append",
        default=[],
        metavar="NAME",
        help="Markdown extension to enable (repeatable)",
    )
    p.add_argument(
        "--parser",
        default=None,
        metavar="FEATURE",
        help="BeautifulSoup tree builder (default: html.parser)",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and re-translate")
    p.add_argument("--debug", action="store_true", help="Dump the element tree to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "jsxtree.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Markdown extensions: config < CLI
    extensions: list[str] = []
    cfg_md = config.get("markdown")
    if isinstance(cfg_md, dict):
        cfg_ext = cfg_md.get("extensions")
        if isinstance(cfg_ext, list):
            extensions.extend(str(e) for e in cfg_ext)
    extensions.extend(args.extension)

    # Parser feature: config < CLI
    features = "html.parser"
    cfg_parser = config.get("parser")
    if isinstance(cfg_parser, dict):
        cfg_features = cfg_parser.get("features")
        if isinstance(cfg_features, str):
            features = cfg_features
    if args.parser is not None:
        features = args.parser

    # Emit format: config < CLI
    emit = "tree"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_emit = cfg_output.get("emit")
        if isinstance(cfg_emit, str):
            if cfg_emit not in EMIT_FORMATS:
                raise argparse.ArgumentTypeError(f"invalid emit format in config: {cfg_emit}")
            emit = cfg_emit
    if args.emit is not None:
        emit = args.emit

    if args.markdown:
        markdown = True
    elif args.html:
        markdown = False
    else:
        markdown = input_file.suffix.lower() in MARKDOWN_SUFFIXES

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        markdown=markdown,
        single=args.single,
        emit=emit,
        extensions=extensions,
        features=features,
        watch=args.watch,
        debug=args.debug,
    )


def make_cache(options: CliOptions) -> TranslationCache:
    """Build a TranslationCache wired to the configured parser and converter."""
    from jsxtree.cache import TranslationCache
    from jsxtree.markup import parse_fragment
    from jsxtree.md import markdown_to_html

    return TranslationCache(
        parser=functools.partial(parse_fragment, features=options.features),
        converter=functools.partial(markdown_to_html, extensions=options.extensions),
    )


def translate_file(options: CliOptions, cache: TranslationCache | None = None) -> str:
    """Read and translate a file, returning the emitted output."""
    import io

    from jsxtree.debug import dump_elements
    from jsxtree.render import render

    if cache is None:
        cache = make_cache(options)

    source = options.input_file.read_text(encoding="utf-8")
    html = cache.converter(source) if options.markdown else source

    if options.single:
        elements = (cache.get_or_translate_single(html),)
    else:
        elements = cache.get_or_translate(html)

    if options.debug:
        dump_elements(elements, file=sys.stderr)

    if options.emit == "html":
        return render(elements) + "\n"
    buf = io.StringIO()
    dump_elements(elements, file=buf)
    return buf.getvalue()


def _report(exc: TranslationError, options: CliOptions) -> None:
    """Print an error with source context when the input is plain HTML."""
    source = "" if options.markdown else options.input_file.read_text(encoding="utf-8").strip()
    print(exc.format(source, str(options.input_file)), file=sys.stderr)


def retranslate(options: CliOptions, cache: TranslationCache) -> str:
    """Translate a changed file, dropping entries left by earlier revisions."""
    cache.clear()
    return translate_file(options, cache)


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, re-translate on each modification."""
    cache = make_cache(options)
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    out = retranslate(options, cache)
                    if options.output_file:
                        options.output_file.write_text(out, encoding="utf-8")
                    else:
                        sys.stdout.write(out)
                        sys.stdout.flush()
                    print(f"Translated {options.input_file}", file=sys.stderr)
                except TranslationError as exc:
                    _report(exc, options)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s:%(name)s: %(message)s",
        )

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    try:
        out = translate_file(options)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except (ParseFailure, MarkdownConversionFailure) as exc:
        _report(exc, options)
        return 1
    except TranslationError as exc:
        _report(exc, options)
        return 2

    if options.output_file:
        options.output_file.write_text(out, encoding="utf-8")
    else:
        sys.stdout.write(out)

    return 0
