from time import sleep, perf_counter

import lazylist as ll
from utils import configure, measure_performance, get_performance_summary, EmptyListError

configure(log_level="DEBUG", repr_limit=8)


def expensive_transform(x):
    # Simulate a costly step so laziness is visible
    print(f"  computing f({x}) ...")
    sleep(0.2)  # pretend this is expensive
    return x * x

print("\n--- Demo: laziness (no work until iterated) ---")
data = ll.from_array(range(1, 10_000))  # big-ish source
pipeline = ll.take(5, ll.drop(3, ll.map(expensive_transform, data)))

print(f"Constructed pipeline of length {len(pipeline)}. No output yet (nothing computed).")
print("\nIterating (should compute only the 5 items asked for):")
t0 = perf_counter()
out = ll.to_list(pipeline)
t1 = perf_counter()
print(f"Result: {out}")
print(f"Time: {t1 - t0:.2f}s\n")

print("--- Demo: replay (every consumer gets a fresh traversal) ---")
L = ll.l([1, 2, 6, 10, 12, 202])
print(f"head: {ll.head(L)}, tail: {ll.tail(L)}, head again: {ll.head(L)}")
print(f"get(4): {L[4]}, last: {ll.last(L)}")
print(f"concat view: {L + ll.l(7, 8, 9)}\n")

print("--- Demo: eager spots (filter, reverse) ---")
big = ll.filter(lambda v: v > 100, L)
print(f"filter(x > 100): {big} with length {len(big)}")
print(f"reverse: {ll.reverse(L)}\n")

print("--- Demo: reductions ---")
print(f"foldl(+): {ll.foldl(lambda acc, x: acc + x, 0, ll.l([1, 2, 3, 4, 6]))}")
print(f"foldr(cons): {ll.foldr(ll.cons, ll.empty(), L)}")
print(f"sum: {ll.sum(L)}, product: {ll.product(ll.l(1, 2, 3, 4))}")
print(f"minimum: {ll.minimum(L)}, maximum: {ll.maximum(L)}")
print(f"zip_with(*): {ll.zip_with(lambda a, b: a * b, L, ll.l(1, 10, 100))}")
print(f"chain: {ll.chain(ll.l(1, 2, 3), lambda x: [x] * x)}")
try:
    ll.head(ll.empty())
except EmptyListError as e:
    print(f"head(empty()): {type(e).__name__}: {e}\n")

print("--- Demo: measuring a large reduction ---")
info = measure_performance("sum of a million", ll.sum, ll.map(lambda x: x * 2, ll.from_array(range(1_000_000))))
print(f"Result: {info['result']} in {info['execution_time_ms']:.1f}ms, peak {info['memory_usage_mb']:.3f}MB")
print(f"Summary: {get_performance_summary()}")
