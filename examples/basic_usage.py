"""Basic gradientview usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from gradientview import (
    Appearance,
    ColorRGBINT,
    Conic,
    DynamicColor,
    GradientSpec,
    GradientView,
    Radial,
    transform,
)
from gradientview.samples import SAMPLES


def demonstrate_transforms() -> None:
    # The same colours and points, interpreted by each kind.
    spec = GradientSpec(
        colors=["#3dc5ff", "#9be4ff", "#ffb89c"],
        start_point=(0.5, 1.0),
        end_point=(0.0, 0.0),
    )
    print("Axial:", transform(spec))
    print("Radial:", transform(spec.replace(kind=Radial(1.0)), (320, 480)))
    print("Flattened radial:", transform(spec.replace(kind=Radial(0.5)), (320, 480)))
    print("Conic:", transform(spec.replace(kind=Conic(0.6)), (320, 480)))


def demonstrate_view() -> None:
    # A host reports size and appearance changes explicitly.
    ink = DynamicColor(light=ColorRGBINT((20, 20, 20)), dark=ColorRGBINT((235, 235, 235)))
    view = GradientView(GradientSpec(colors=[ink, "#ff8000"], kind=Radial(0.75)), size=(390, 844))
    print("Light layer:", view.layer)

    view.set_appearance(Appearance.DARK)
    print("Dark colours:", view.layer.colors)

    view.layout(844, 390)
    print("Rotated geometry:", view.layer.start_point, view.layer.end_point)


def demonstrate_samples() -> None:
    for name, spec in SAMPLES.items():
        params = transform(spec, (390, 844))
        print(f"{name}: {params.layer_type} with {len(params.locations)} stops")


if __name__ == "__main__":
    demonstrate_transforms()
    demonstrate_view()
    demonstrate_samples()
