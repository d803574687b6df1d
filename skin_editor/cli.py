# skin_editor/cli.py
"""
skin-editor command line.

Usage:
  skin-editor (INPUT | --value TEXT) [--out PATH] [--rotate DIR ...] [--clear-outer]
              [--hue N] [--saturation N] [--lightness N] [--contrast N]
              [--colorize-hue N | --colorize-colour TEXT] [--colorize-amount PCT]
              [--target-hue N] [--hue-range N] [--grey-amount PCT]
              [--reference PATH] [--match-hue] [--histograms DIR] [--debug]

Input:
  A 64x64 skin PNG. Alpha is preserved; fully transparent pixels are not
  recoloured. --value takes the skin inline instead: a data URI, raw base64
  image bytes, or a base64 texture value. Texture values and http(s) URLs
  only have their skin URL reported; nothing is downloaded.

Output:
  PNG. If --out is omitted, writes <stem>_edited.png next to INPUT
  (skin_edited.png in the working directory for --value).

Order:
  rotations (as given) -> clear outer layer -> filters -> save.
  --match-hue picks the hue shift from the unedited input and a reference.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .analysis import (
    average_hue,
    colorize_hue_from_text,
    extract_histogram,
    hue_gradient_stops,
)
from .constants import GREY_SATURATION, HUE_BUCKET_DEGREES, SLIDER_RANGES
from .core_types import FilterSettings, Histogram, PixelBuffer
from .errors import InvalidDimensionError
from .faces import DIRECTIONS, clear_outer_layer, require_skin_dimensions, rotate_head_in_buffer
from .filters import apply_filters
from .hue_match import find_best_hue_shift, hue_shift_scores
from .image_io import (
    is_image_file,
    load_pixel_buffer,
    load_pixel_buffer_from_base64,
    save_pixel_buffer,
    texture_url_from_value,
)
from .preview import render_brightness_histogram, render_head_strip, render_hue_histogram
from .utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
    warn,
)

# CLI args & small helpers


def _slider(name: str) -> Callable[[str], int]:
    """argparse type that accepts an int inside the named slider's range."""
    lo, hi, _default = SLIDER_RANGES[name]

    def parse(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"{text!r} is not an integer") from None
        if not lo <= value <= hi:
            raise argparse.ArgumentTypeError(f"{value} outside {lo}..{hi}")
        return value

    return parse


def _default(name: str) -> int:
    return SLIDER_RANGES[name][2]


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments for skin editing.

    Returns:
      argparse.Namespace with:
        src: Path to the skin, or None when value is given
        value: optional inline skin text
        out: optional output Path
        rotate: list of directions, applied in order
        clear_outer: bool
        hue, saturation, lightness, contrast: ints
        colorize_hue / colorize_colour, colorize_amount (percent)
        target_hue, hue_range, grey_amount (percent)
        reference: optional Path, match_hue: bool
        histograms: optional Path to a folder for chart PNGs
        debug: bool
    """
    parser = argparse.ArgumentParser(
        prog="skin-editor",
        description="Recolour and re-orient a 64x64 skin texture.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "src", type=Path, nargs="?", default=None, help="Input skin PNG (64x64)"
    )
    source.add_argument(
        "--value",
        default=None,
        help="Inline skin: data URI, base64 image, or base64 texture value.",
    )
    parser.add_argument("--out", type=Path, default=None, help="Output path (optional)")
    parser.add_argument(
        "--rotate",
        choices=list(DIRECTIONS),
        action="append",
        default=[],
        help="Turn the head; repeat to chain turns.",
    )
    parser.add_argument(
        "--clear-outer", action="store_true", help="Make the outer head layer transparent."
    )
    parser.add_argument("--hue", type=_slider("hue"), default=_default("hue"))
    parser.add_argument(
        "--saturation", type=_slider("saturation"), default=_default("saturation")
    )
    parser.add_argument(
        "--lightness", type=_slider("lightness"), default=_default("lightness")
    )
    parser.add_argument("--contrast", type=_slider("contrast"), default=_default("contrast"))

    colorize = parser.add_mutually_exclusive_group()
    colorize.add_argument(
        "--colorize-hue", type=_slider("colorize_hue"), default=_default("colorize_hue")
    )
    colorize.add_argument(
        "--colorize-colour",
        default=None,
        help="Colorize towards this colour's hue ('#rrggbb' or 'r,g,b').",
    )
    parser.add_argument(
        "--colorize-amount",
        type=_slider("colorize_amount"),
        default=_default("colorize_amount"),
        help="Percent.",
    )
    parser.add_argument(
        "--target-hue", type=_slider("target_hue"), default=_default("target_hue")
    )
    parser.add_argument(
        "--hue-range", type=_slider("hue_range"), default=_default("hue_range")
    )
    parser.add_argument(
        "--grey-amount",
        type=_slider("grey_amount"),
        default=_default("grey_amount"),
        help="Percent of desaturation at target hue.",
    )
    parser.add_argument(
        "--reference", type=Path, default=None, help="Reference image for hue comparison"
    )
    parser.add_argument(
        "--match-hue",
        action="store_true",
        help="Replace --hue with the shift that best matches --reference.",
    )
    parser.add_argument(
        "--histograms", type=Path, default=None, help="Write chart PNGs to this folder"
    )
    parser.add_argument("--debug", action="store_true", help="Verbose details")
    args = parser.parse_args(argv)
    if args.src is None and args.value is None:
        parser.error("an INPUT path or --value is required")
    return args


def settings_from_args(args: argparse.Namespace, hue_shift: int) -> FilterSettings:
    """Build FilterSettings from parsed flags (amounts given in percent)."""
    colorize_hue = args.colorize_hue
    if args.colorize_colour is not None:
        parsed = colorize_hue_from_text(args.colorize_colour)
        if parsed is None:
            raise ValueError(f"cannot parse colour {args.colorize_colour!r}")
        colorize_hue = parsed
    return FilterSettings.from_percent(
        hue_shift=float(hue_shift),
        saturation=float(args.saturation),
        lightness=float(args.lightness),
        contrast=float(args.contrast),
        colorize_hue=float(colorize_hue),
        colorize_amount=float(args.colorize_amount),
        target_hue=float(args.target_hue),
        hue_range=float(args.hue_range),
        grey_amount=float(args.grey_amount),
    )


def _top_hue_buckets(hist: Histogram, top: int = 3) -> List[Tuple[int, int]]:
    """[(bucket_start_deg, count), ...] for the busiest hue buckets."""
    counts = hist.hue_buckets
    order = np.argsort(-counts, kind="stable")[:top]
    return [
        (int(i * HUE_BUCKET_DEGREES), int(counts[i])) for i in order if counts[i] > 0
    ]


def _report_histogram(label: str, buffer: PixelBuffer, hist: Histogram) -> None:
    visible = int(np.count_nonzero(buffer.alpha))
    greys = visible - hist.hue_total
    log(
        f"[{label}] "
        + key_value_pairs_to_string(
            [
                ("Visible", visible),
                ("Hue samples", hist.hue_total),
                ("Greys", greys),
                ("Avg hue", average_hue(buffer)),
            ]
        )
    )
    peaks = _top_hue_buckets(hist)
    if peaks:
        log("  peaks: " + ", ".join(f"{deg}-{deg + 10}deg x{n:,}" for deg, n in peaks))


def _write_charts(
    outdir: Path,
    stem: str,
    edited: PixelBuffer,
    hist: Histogram,
    ref_hist: Optional[Histogram],
) -> List[Path]:
    outdir.mkdir(parents=True, exist_ok=True)
    written = [
        outdir / f"{stem}_hue.png",
        outdir / f"{stem}_brightness.png",
        outdir / f"{stem}_head.png",
    ]
    render_hue_histogram(hist, ref_hist).save(written[0])
    render_brightness_histogram(hist, ref_hist).save(written[1])
    render_head_strip(edited).save(written[2])
    return written


# Processing


def load_inline_skin(value: str) -> Optional[PixelBuffer]:
    """
    Decode --value text.

    Data URIs and raw base64 images are decoded. A base64 texture value or an
    http(s) URL only has its skin URL logged, and None is returned.
    """
    text = value.strip()
    url: Optional[str] = None
    if text.startswith(("http://", "https://")):
        url = text
    elif not text.startswith("data:"):
        try:
            url = texture_url_from_value(text)
        except ValueError:
            url = None  # not a texture value; try it as base64 image bytes

    if url is not None:
        log(f"Skin URL: {url}")
        warn("remote skins are not downloaded; save the PNG and pass it as INPUT")
        return None
    return load_pixel_buffer_from_base64(text)


def process_skin(args: argparse.Namespace) -> Optional[Path]:
    """
    Process one skin end-to-end:
      load -> validate -> rotate -> clear outer -> match hue -> filter -> save -> report.

    Returns the written path, or None when --value only named a remote skin.
    """
    t_start = time.perf_counter()
    out_path: Path
    if args.src is not None:
        src: Path = args.src
        out_path = args.out or src.with_name(f"{src.stem}_edited.png")
        print_banner(src.name)
        pristine = load_pixel_buffer(src)
    else:
        out_path = args.out or Path.cwd() / "skin_edited.png"
        print_banner("inline skin")
        inline = load_inline_skin(args.value)
        if inline is None:
            return None
        pristine = inline
    require_skin_dimensions(pristine)

    if args.debug:
        centre = average_hue(pristine)
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Loaded", f"{pristine.width}x{pristine.height}"),
                    ("Alpha=0", int(np.count_nonzero(pristine.alpha == 0))),
                    ("Avg hue", centre),
                ]
            )
        )
        debug_log(
            "hue gradient: "
            + " ".join(f"{h:.0f}" for h in hue_gradient_stops(centre))
        )

    working = pristine.clone()
    for direction in args.rotate:
        rotate_head_in_buffer(working, direction)
        if args.debug:
            debug_log(f"rotated {direction}")
    if args.clear_outer:
        clear_outer_layer(working)
        if args.debug:
            debug_log("cleared outer layer")

    reference: Optional[PixelBuffer] = None
    if args.reference is not None:
        reference = load_pixel_buffer(args.reference)

    hue_shift = int(args.hue)
    if args.match_hue:
        if reference is None:
            raise ValueError("--match-hue needs --reference")
        hue_shift = find_best_hue_shift(pristine, reference)
        log(f"Matched hue shift: {hue_shift}")
        if args.debug:
            scores = hue_shift_scores(
                extract_histogram(pristine), extract_histogram(reference)
            )
            best = sorted(scores, key=lambda kv: kv[1])[:5]
            debug_log(
                "best shifts: " + ", ".join(f"{d}:{s:.4f}" for d, s in best)
            )

    settings = settings_from_args(args, hue_shift)
    print_config_line("filters", settings.as_pairs(), debug=False)
    if settings.is_identity and not (args.rotate or args.clear_outer):
        warn("no edits requested; output equals input")

    t_filter0 = time.perf_counter()
    edited = apply_filters(working, settings)
    t_filter1 = time.perf_counter()

    out_path = save_pixel_buffer(out_path, edited)
    log(f"Wrote {out_path.name} | size={edited.width}x{edited.height}")

    hist = extract_histogram(edited)
    _report_histogram("edited", edited, hist)
    ref_hist: Optional[Histogram] = None
    if reference is not None:
        ref_hist = extract_histogram(reference)
        _report_histogram("reference", reference, ref_hist)

    if args.histograms is not None:
        for p in _write_charts(args.histograms, out_path.stem, edited, hist, ref_hist):
            log(f"Wrote {p.name}")

    if args.debug:
        debug_log(
            f"grey threshold {GREY_SATURATION:g}  "
            f"filter={format_seconds_compact(t_filter1 - t_filter0)}  "
            f"total={format_seconds_compact(time.perf_counter() - t_start)}"
        )
    return out_path


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point. Exits with status 2 on missing or wrong-sized input."""
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    for path in (args.src, args.reference):
        if path is None:
            continue
        if not path.exists():
            error(f"not found: {path}")
            sys.exit(2)
        if not is_image_file(path):
            error(f"not an image: {path}")
            sys.exit(2)

    label = args.src.name if args.src is not None else "--value"
    try:
        process_skin(args)
    except InvalidDimensionError as e:
        error(f"{label}: texture must be 64x64 ({e})")
        sys.exit(2)
    except ValueError as e:
        error(str(e))
        sys.exit(2)


if __name__ == "__main__":
    main()
