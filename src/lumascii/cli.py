import argparse
import logging
import sys

from lumascii.charsets import CHARSETS, DEFAULT_CHARSET, get_charset
from lumascii.converter import RenderOptions, image_to_ascii, load_image, write_output
from lumascii.errors import LumasciiError, MissingInputError

logger = logging.getLogger("lumascii")


def setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lumascii", description="Render a PNG or JPEG image as ASCII art")
    parser.add_argument("image", nargs="?", default=None, help="Path to input image (.png, .jpg, .jpeg)")
    parser.add_argument("-o", "--out", default=None, help="File to write the output to (default: stdout)")
    parser.add_argument("-r", "--resize", default=None, metavar="WxH", help="Resize the image to specific dimensions")
    parser.add_argument(
        "-s",
        "--scale",
        type=float,
        default=0.0,
        help="Scale the image, preserving aspect ratio (default: 0, no scaling). Ignored when --resize is given.",
    )
    parser.add_argument(
        "-c",
        "--charset",
        default=DEFAULT_CHARSET,
        help=f"Character set to use for the output (default: {DEFAULT_CHARSET}; available: {', '.join(sorted(CHARSETS))})",
    )
    parser.add_argument("-V", "--verbose", action="store_true", default=False, help="Print additional debug information")
    return parser


def run(image_path: str | None, options: RenderOptions, out: str | None = None) -> None:
    if not image_path:
        raise MissingInputError("missing input image argument")

    ramp = get_charset(options.charset)
    logger.debug("Found character set '%s' (%d characters)", options.charset, len(ramp))

    image = load_image(image_path)
    text = image_to_ascii(image, ramp, resize=options.resize, scale=options.scale)
    write_output(text, out)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(args.verbose)

    options = RenderOptions(resize=args.resize, scale=args.scale, charset=args.charset)
    try:
        run(args.image, options, out=args.out)
    except LumasciiError as e:
        logger.error("%s", e)
        return 1
    return 0
