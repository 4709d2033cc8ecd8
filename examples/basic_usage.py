"""Basic canvasutils usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import math

import numpy as np

from canvasutils import (
    Arc,
    ClosePath,
    LineTo,
    MoveTo,
    convert,
    create_linear_gradient,
    create_radial_gradient,
    draw_to_canvas,
    evenly_spaced_stops,
    fill_path,
    get_color_values,
    hue_wheel_stops,
    instruction_from_dict,
    np_convert,
    rgb_to_hsb,
    rotate_context,
    stroke_path,
)


def demonstrate_conversions() -> None:
    # Hue is a fraction of a turn; saturation and brightness are in [0, 1].
    print("RGB -> HSB:", rgb_to_hsb(255, 128, 0))
    print("HSL -> hex:", convert((2 / 3, 1.0, 0.5), "hsl", "hex"))
    print("hex -> HSB:", convert("#336699", "hex", "hsb"))

    # Whole images convert at once along the last axis.
    pixels = np.array([[[255, 0, 0], [0, 255, 0]], [[0, 0, 255], [255, 255, 255]]])
    print("Image as HSL:\n", np_convert(pixels, "rgb", "hsl"))

    # Any color string the surface understands can be sampled.
    print("orange as RGBA:", get_color_values("orange"))


def demonstrate_gradients() -> None:
    def draw(ctx):
        ctx.fill_style = create_linear_gradient(ctx, 0, 0, 256, 0, hue_wheel_stops(13))
        ctx.fill_rect(0, 0, 256, 48)

        ctx.fill_style = create_radial_gradient(
            ctx, 128, 112, 0, 48, evenly_spaced_stops(["white", "gold", "#ff450000"])
        )
        ctx.fill_rect(0, 48, 256, 128)

    draw_to_canvas(256, 176, draw).save("gradients.png")
    print("Wrote gradients.png")


def demonstrate_paths() -> None:
    star = [MoveTo(64, 8)]
    for k in range(1, 10):
        radius = 56 if k % 2 == 0 else 22
        angle = -math.pi / 2 + k * math.pi / 5
        star.append(LineTo(64 + radius * math.cos(angle), 64 + radius * math.sin(angle)))
    star.append(ClosePath())

    ring = [
        instruction_from_dict({"step": "arc", "x": 64, "y": 64, "radius": 60,
                               "start_angle": 0, "end_angle": 2 * math.pi}),
    ]

    def draw(ctx):
        ctx.line_width = 3
        stroke_path(ctx, "slategray", ring)
        rotate_context(ctx, math.pi / 10)
        fill_path(ctx, "tomato", star)
        fill_path(ctx, "navy", [Arc(64, 64, 8, 0, 2 * math.pi)])

    draw_to_canvas(128, None, draw).save("paths.png")
    print("Wrote paths.png")


if __name__ == "__main__":
    demonstrate_conversions()
    demonstrate_gradients()
    demonstrate_paths()
