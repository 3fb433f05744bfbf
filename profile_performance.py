#!/usr/bin/env python3
"""Performance profiling script for the luau-props-lsp completion engine."""

import time

from luau_props_lsp.engine import PropsCompletionEngine

COMPONENT = """\
local function Row(props)
    return e("Frame", {
        Size = UDim2.new(1, 0, 0, 24),
        LayoutOrder = props.order,
    }, {
        Label = e("TextLabel", {
            Text = props.text,
            TextSize = 14,
        }),
        Icon = e("ImageLabel", { Image = props.icon }),
    })
end
"""


def profile_engine_performance():
    """Profile completion queries on small and large documents."""
    engine = PropsCompletionEngine()

    small_content = 'local e = React.createElement\n\nreturn e("TextLabel", {\n    '
    large_content = COMPONENT * 500 + 'return e("Frame", {\n    '

    print("Performance Profiling for luau-props-lsp Engine")
    print("=" * 50)

    start_time = time.perf_counter()
    for _ in range(1000):
        engine.complete(small_content, len(small_content))
    small_time = time.perf_counter() - start_time

    print(f"Small document (1000 queries): {small_time:.4f}s")
    print(f"Average per small query: {small_time / 1000 * 1000:.3f}ms")

    start_time = time.perf_counter()
    for _ in range(1000):
        engine.complete(large_content, len(large_content))
    large_time = time.perf_counter() - start_time

    print(f"\nLarge document ({len(large_content)} chars, 1000 queries): {large_time:.4f}s")
    print(f"Average per large query: {large_time / 1000 * 1000:.3f}ms")

    # Queries in the middle of the document, outside any props table
    offsets = range(0, len(large_content), len(COMPONENT))
    start_time = time.perf_counter()
    hits = sum(1 for offset in offsets if engine.complete(large_content, offset))
    scan_time = time.perf_counter() - start_time

    print(f"\nScattered queries ({len(offsets)}): {scan_time * 1000:.2f}ms, {hits} with completions")


if __name__ == "__main__":
    profile_engine_performance()
