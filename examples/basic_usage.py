"""Basic chromaconv usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

from chromaconv import Color, ColorSpace, Hsl, conversion_path, convert


def demonstrate_colors() -> None:
    # Construct a color and convert it between spaces.
    accent = Color("srgb", 0.8235, 0.4118, 0.1176)
    print("sRGB:", accent)
    print("-> HSL:", accent.to_color_space("hsl"))
    print("-> OKLCH:", accent.to_color_space(ColorSpace.OKLCH))
    print("-> display-p3:", accent.to_color_space("display-p3"))

    # Typed projections fail fast on the wrong space.
    hsl = accent.to_color_space("hsl").project(Hsl)
    print("HSL hue:", hsl.hue)
    try:
        accent.project(Hsl)
    except TypeError as exc:
        print("Refused:", exc)


def demonstrate_missing_channels() -> None:
    # None marks a channel as unspecified; the flag survives conversion.
    lab = Color("lab", 60.0, None, None, alpha=0.5)
    print("Lab with missing a/b:", lab)
    print("-> LCH:", lab.to_color_space("lch"))


def demonstrate_tuples() -> None:
    print("Tuple API:", convert((1.0, 0.0, 0.0), "srgb", "oklab"))
    print("Route lch -> oklch:", [s.value for s in conversion_path("lch", "oklch")])


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    demonstrate_colors()
    demonstrate_missing_channels()
    demonstrate_tuples()
