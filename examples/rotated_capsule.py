import timeit

from wireshapes import Capsule, MatplotlibSink, Transform, WireframeRenderer
from wireshapes.transform import ENGINE_ORDER


def main():
    sink = MatplotlibSink()
    capsule = Capsule(radius=0.5, height=2, segments=11)

    renderer = WireframeRenderer(capsule, Transform(), color="lightgray")
    renderer.render(sink)

    # same capsule, tilted with the host engine's Euler convention
    renderer.transform = Transform(rotation=(30, 45, 60), order=ENGINE_ORDER)
    renderer.color = "black"
    renderer.render(sink)

    sink.show()


if __name__ == "__main__":
    print(f"Execution time: {timeit.timeit(main, number=1)}")
