from wireshapes import Pyramid, SegmentCollector, Transform, WireframeRenderer


def main():
    # render a rotating pyramid over a few frames, both host callbacks firing each frame
    renderer = WireframeRenderer(Pyramid(base_size=2, height=1.5), color="white")
    sink = SegmentCollector()

    for frame in range(8):
        renderer.transform = Transform(center=(0, 0.5, 0), rotation=(0, 0, 45 * frame))
        renderer.on_post_render(sink)
        renderer.on_draw_gizmos(sink)

    print(f"{sink.batch_count} batches, {len(sink.segments)} segments in the last one")
    print(sink.segments.round(3))


if __name__ == "__main__":
    main()
