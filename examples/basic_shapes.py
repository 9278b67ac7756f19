from wireshapes import (
    Capsule,
    Cylinder,
    MatplotlibSink,
    Pyramid,
    Rectangle,
    Sphere,
    Transform,
    WireframeRenderer,
)


def main():
    sink = MatplotlibSink()

    # Lay the five shapes out along the X axis
    shapes = [
        (Pyramid(), "tab:red"),
        (Cylinder(segments=16), "tab:blue"),
        (Rectangle(), "tab:green"),
        (Sphere(segments=10), "tab:orange"),
        (Capsule(segments=12), "tab:purple"),
    ]
    for i, (shape, color) in enumerate(shapes):
        WireframeRenderer(shape, Transform(center=(3 * i, 0, 0)), color=color).render(sink)

    sink.show()


if __name__ == "__main__":
    main()
