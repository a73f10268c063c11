# SPDX-License-Identifier: Apache-2.0
"""Command line entry point: ``landtemp render`` and ``landtemp targets``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from landtemp import __version__
from landtemp.pipeline import DEFAULT_TARGET, run
from landtemp.utils.cli_helpers import (
    add_verbosity_flags,
    apply_verbosity,
    configure_logging_from_env,
)
from landtemp.visualization.renderers import available, get
from landtemp.visualization.styles import DEFAULT_LAYOUT, resolve_palette


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text!r}")
    return value


def _renderer_options(ns: argparse.Namespace) -> dict[str, Any]:
    """Translate argparse namespace into renderer keyword options."""

    options: dict[str, Any] = {}
    if ns.page_title:
        options["page_title"] = ns.page_title
    # Local input paths stay out of the published page config.
    if ns.url:
        options["source"] = ns.url
    return options


def handle_render(ns: argparse.Namespace) -> int:
    """Handle ``render`` subcommand.

    Bad arguments exit with status 2 through ``ns.usage_error``; a failed load
    returns 1 and writes nothing.
    """

    apply_verbosity(ns)
    configure_logging_from_env()

    try:
        get(ns.target)
    except KeyError as exc:
        ns.usage_error(exc.args[0])
    try:
        layout = DEFAULT_LAYOUT.resized(width=ns.width, height=ns.height)
        palette = resolve_palette(ns.palette)
    except ValueError as exc:
        ns.usage_error(str(exc))

    bundle = run(
        output_dir=Path(ns.output),
        url=ns.url,
        input_path=ns.input,
        target=ns.target,
        layout=layout,
        palette=palette,
        timeout=ns.timeout,
        max_retries=ns.retries,
        **_renderer_options(ns),
    )
    if bundle is None:
        return 1

    logging.info("Generated %s bundle at %s", ns.target, bundle.entrypoint)
    if bundle.assets:
        logging.debug(
            "Bundle assets: %s",
            ", ".join(
                str(path.relative_to(bundle.output_dir)) for path in bundle.assets
            ),
        )
    return 0


def handle_targets(ns: argparse.Namespace) -> int:
    """Handle ``targets`` subcommand: list renderer slugs."""

    for cls in available():
        print(f"{cls.slug}\t{cls.description}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="landtemp",
        description="Render the monthly global land-surface temperature heat map.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    sub = parser.add_subparsers(dest="command", required=True)

    p_render = sub.add_parser(
        "render", help="Fetch the dataset and write a heat map bundle"
    )
    p_render.add_argument(
        "--output", "-o", required=True, help="Output directory for the bundle"
    )
    p_render.add_argument(
        "--target",
        default=DEFAULT_TARGET,
        help=f"Renderer target (default: {DEFAULT_TARGET}); see 'landtemp targets'",
    )
    src = p_render.add_mutually_exclusive_group()
    src.add_argument(
        "--url", help="Dataset URL (default: LANDTEMP_DATA_URL or the public source)"
    )
    src.add_argument(
        "--input", "-i", help="Read the dataset from a JSON file or '-' for stdin"
    )
    p_render.add_argument(
        "--width", type=_positive_float, help="Plot width in pixels"
    )
    p_render.add_argument(
        "--height", type=_positive_float, help="Plot height in pixels"
    )
    p_render.add_argument(
        "--palette", help="Matplotlib colormap name sampled into the nine buckets"
    )
    p_render.add_argument("--page-title", help="HTML <title> for heatmap-page")
    p_render.add_argument(
        "--timeout",
        type=_positive_float,
        help="HTTP timeout in seconds (LANDTEMP_HTTP_TIMEOUT)",
    )
    p_render.add_argument(
        "--retries",
        type=int,
        help="Retries on transient HTTP statuses (LANDTEMP_HTTP_RETRIES)",
    )
    add_verbosity_flags(p_render)
    p_render.set_defaults(func=handle_render, usage_error=p_render.error)

    p_targets = sub.add_parser("targets", help="List renderer targets")
    p_targets.set_defaults(func=handle_targets)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(list(argv) if argv is not None else None)
    return int(ns.func(ns))


if __name__ == "__main__":  # pragma: no cover - exercised in CLI tests
    sys.exit(main())
