import os
import sys
import warnings
from pathlib import Path

_VERBOSE_FLAGS = {"--verbose", "-v"}


def verbose_requested(argv):
    """Match the spellings the argument parser accepts for --verbose."""

    return any(arg in _VERBOSE_FLAGS for arg in argv)


_cli_verbose = verbose_requested(sys.argv[1:])
_env_log_level = os.environ.get("TF_CPP_MIN_LOG_LEVEL")
_suppress_messages = (not _cli_verbose) and _env_log_level != "0"

if _suppress_messages and _env_log_level is None:
    os.environ["TF_CPP_MIN_LOG_LEVEL"] = "3"

if _suppress_messages:
    warnings.filterwarnings(
        "ignore",
        message=r"Protobuf gencode version .* is exactly one major version older than the runtime version .*",
        category=UserWarning,
        module="google.protobuf",
    )

VERBOSE = _cli_verbose


def log(message, *args, **kwargs):
    if VERBOSE:
        print(message, *args, **kwargs)


import tensorflow as tf

if _suppress_messages:
    tf.get_logger().setLevel("ERROR")
    for handler in tf.get_logger().handlers:
        handler.setLevel("ERROR")

from fractals import FractalKind, ImageCanvas, RenderConfig, render

DEFAULT_SIZE = 400
DEFAULT_OUTPUT = "fractal.png"


def select_device():
    """Use the first GPU TensorFlow can see and fall back to the CPU."""

    gpus = tf.config.list_physical_devices('GPU')
    if not gpus:
        log("No GPU found, using CPU")
        return '/CPU:0'
    try:
        for gpu in gpus:
            tf.config.experimental.set_memory_growth(gpu, True)
    except RuntimeError as e:
        log(e)
        return '/CPU:0'
    log("GPU found, using %s" % gpus[0].name)
    return '/GPU:0'


from argparse import ArgumentParser, ArgumentTypeError


def parse_size(value):
    """Decode ``WIDTHxHEIGHT``; a zero on either side falls back to the default size."""

    left, sep, right = value.lower().partition('x')
    if not sep:
        raise ArgumentTypeError(f"invalid size value ({value}), expected WIDTHxHEIGHT")
    try:
        width, height = int(left), int(right)
    except ValueError:
        raise ArgumentTypeError(f"invalid size value ({value}), expected WIDTHxHEIGHT") from None
    if width < 0 or height < 0:
        raise ArgumentTypeError(f"invalid size value ({value}), sizes must not be negative")
    return (width or DEFAULT_SIZE, height or DEFAULT_SIZE)


def parse_type(value):
    try:
        code = int(value)
    except ValueError:
        raise ArgumentTypeError(f"invalid type value ({value})") from None
    kind = FractalKind.from_code(code)
    if kind.value != code:
        log(f"Unknown type {code}, rendering the {kind.label}")
    return kind


def resolve_output_path(value):
    """Expand ``~`` and give a suffix-less name the ``.png`` extension."""

    path = Path(value).expanduser()
    if not path.suffix:
        path = path.with_suffix('.png')
    return path


def build_parser():
    parser = ArgumentParser(description='Render a Julia or Mandelbrot set to an image file.')

    parser.add_argument('-s', '--size', type=parse_size,
                        dest='size', help='image size in pixels, e.g. 800x600. A zero dimension falls back to %d.' % DEFAULT_SIZE,
                        metavar='WIDTHxHEIGHT', default=(DEFAULT_SIZE, DEFAULT_SIZE))

    parser.add_argument('-t', '--type', type=parse_type,
                        dest='kind', help='fractal to render: 0 for the Julia set, 1 for the Mandelbrot set. Unknown values render the Julia set.',
                        metavar='TYPE', default=FractalKind.MANDELBROT)

    parser.add_argument('-o', '--out', type=str,
                        dest='output', help='output file. The format follows the extension; ".png" is appended when there is none.',
                        metavar='PATH', default=DEFAULT_OUTPUT)

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging, including TensorFlow and hardware diagnostics.')

    return parser


def write_image(canvas, output_path):
    """Encode ``canvas`` with Pillow; the format is taken from the file extension."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    canvas.to_image().save(str(output_path))


def main(argv=None):
    parser = build_parser()
    opt = parser.parse_args(argv)

    global VERBOSE
    VERBOSE = VERBOSE or bool(opt.verbose)

    width, height = opt.size
    config = RenderConfig(width=width, height=height, kind=opt.kind)
    output_path = resolve_output_path(opt.output)

    log("TensorFlow version: %s" % tf.__version__)
    device = select_device()

    canvas = ImageCanvas(config.width, config.height)
    log("Rendering {0} @ {1}x{2}".format(config.kind.label, canvas.width, canvas.height))
    render(canvas, config.kind, device=device)

    try:
        write_image(canvas, output_path)
    except (OSError, ValueError) as exc:
        print(f"[ERROR] Could not save image file: {exc}", file=sys.stderr)
        sys.exit(1)

    log("Wrote %s" % output_path)


if __name__ == '__main__':
    main()
