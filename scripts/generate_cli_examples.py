from __future__ import annotations

import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

EXAMPLES_ROOT = Path("examples/cli-options")
BASE_ARGS = ["--size", "240x160"]


@dataclass
class Expected:
    path: Path
    size: tuple[int, int] | None = None


@dataclass
class Example:
    name: str
    args: list[str]
    expected: list[Expected]
    clean: list[Path] | None = None

    def full_args(self) -> list[str]:
        return [sys.executable, "render_fractal.py", *self.args]


EXAMPLES: list[Example] = [
    Example(
        name="defaults",
        args=["--out", str(EXAMPLES_ROOT / "defaults" / "fractal.png")],
        expected=[Expected(EXAMPLES_ROOT / "defaults" / "fractal.png", size=(400, 400))],
        clean=[EXAMPLES_ROOT / "defaults"],
    ),
    Example(
        name="mandelbrot-landscape",
        args=[*BASE_ARGS, "--type", "1", "--out", str(EXAMPLES_ROOT / "mandelbrot-landscape" / "wide.png")],
        expected=[Expected(EXAMPLES_ROOT / "mandelbrot-landscape" / "wide.png", size=(240, 160))],
        clean=[EXAMPLES_ROOT / "mandelbrot-landscape"],
    ),
    Example(
        name="mandelbrot-portrait",
        args=["--size", "160x240", "--type", "1", "--out", str(EXAMPLES_ROOT / "mandelbrot-portrait" / "tall.png")],
        expected=[Expected(EXAMPLES_ROOT / "mandelbrot-portrait" / "tall.png", size=(160, 240))],
        clean=[EXAMPLES_ROOT / "mandelbrot-portrait"],
    ),
    Example(
        name="julia-landscape",
        args=[*BASE_ARGS, "--type", "0", "--out", str(EXAMPLES_ROOT / "julia-landscape" / "wide.png")],
        expected=[Expected(EXAMPLES_ROOT / "julia-landscape" / "wide.png", size=(240, 160))],
        clean=[EXAMPLES_ROOT / "julia-landscape"],
    ),
    Example(
        name="julia-portrait",
        args=["--size", "300x600", "--type", "0", "--out", str(EXAMPLES_ROOT / "julia-portrait" / "tall.png")],
        expected=[Expected(EXAMPLES_ROOT / "julia-portrait" / "tall.png", size=(300, 600))],
        clean=[EXAMPLES_ROOT / "julia-portrait"],
    ),
    Example(
        name="unknown-type",
        args=[*BASE_ARGS, "--type", "7", "--out", str(EXAMPLES_ROOT / "unknown-type" / "fallback.png")],
        expected=[Expected(EXAMPLES_ROOT / "unknown-type" / "fallback.png", size=(240, 160))],
        clean=[EXAMPLES_ROOT / "unknown-type"],
    ),
    Example(
        name="zero-dimension",
        args=["--size", "0x120", "--out", str(EXAMPLES_ROOT / "zero-dimension" / "default-width.png")],
        expected=[Expected(EXAMPLES_ROOT / "zero-dimension" / "default-width.png", size=(400, 120))],
        clean=[EXAMPLES_ROOT / "zero-dimension"],
    ),
    Example(
        name="implicit-extension",
        args=[*BASE_ARGS, "--out", str(EXAMPLES_ROOT / "implicit-extension" / "no-suffix")],
        expected=[Expected(EXAMPLES_ROOT / "implicit-extension" / "no-suffix.png", size=(240, 160))],
        clean=[EXAMPLES_ROOT / "implicit-extension"],
    ),
    Example(
        name="format",
        args=[*BASE_ARGS, "--out", str(EXAMPLES_ROOT / "format" / "custom.bmp")],
        expected=[Expected(EXAMPLES_ROOT / "format" / "custom.bmp", size=(240, 160))],
        clean=[EXAMPLES_ROOT / "format"],
    ),
    Example(
        name="verbose",
        args=[*BASE_ARGS, "--verbose", "--out", str(EXAMPLES_ROOT / "verbose" / "diagnostic.png")],
        expected=[Expected(EXAMPLES_ROOT / "verbose" / "diagnostic.png", size=(240, 160))],
        clean=[EXAMPLES_ROOT / "verbose"],
    ),
]


def _remove_previous(example: Example) -> None:
    for path in example.clean or []:
        if path.is_dir():
            shutil.rmtree(path)
        elif path.exists():
            path.unlink()


def _verify(example: Example) -> None:
    import PIL.Image

    for expected in example.expected:
        if not expected.path.is_file():
            raise RuntimeError(f"Expected file {expected.path} was not created")
        if expected.size is not None:
            with PIL.Image.open(expected.path) as image:
                if image.size != expected.size:
                    raise RuntimeError(f"{expected.path} is {image.size}, expected {expected.size}")


def main() -> None:
    EXAMPLES_ROOT.mkdir(parents=True, exist_ok=True)
    for example in EXAMPLES:
        print(f"\n[cli-example] {example.name}")
        _remove_previous(example)
        subprocess.run(example.full_args(), check=True)
        _verify(example)
    print("\nAll CLI examples generated successfully.")


if __name__ == "__main__":
    main()
