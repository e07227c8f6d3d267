"""Time and profile consentdoc on a generated consent form.

Usage:
    python benchmarks/profile_parse.py [SECTIONS] [ITERATIONS]

Prints the mean parse time without profiling, then the hottest functions
from a cProfile run sorted by cumulative and by own time.
"""

from __future__ import annotations

import cProfile
import io
import pstats
import sys
import time

from consentdoc import parse

SECTION = """\
Participation in this study is voluntary. You may withdraw at any time.
<toggle id=toggle{n} initial-value=false expected-value=true>I understand item {n}</toggle>
<select id=select{n} expected-value="*">
    How should we contact you about item {n}?
    <option id=email{n}>Email</option>
    <option id=phone{n}>Phone</option>
</select>
"""

TOP_N = 25


def build_corpus(sections: int) -> str:
    body = "".join(SECTION.format(n=n) for n in range(sections))
    return f"---\ntitle: Benchmark Consent\nversion: 1.0.0\n---\n{body}<signature id=sig />\n"


def report(profiler: cProfile.Profile, sort_key: pstats.SortKey, heading: str) -> None:
    buffer = io.StringIO()
    pstats.Stats(profiler, stream=buffer).sort_stats(sort_key).print_stats(TOP_N)
    print(f"\n--- {heading} ---")
    print(buffer.getvalue())


def main(argv: list[str]) -> None:
    sections = int(argv[0]) if argv else 200
    iterations = int(argv[1]) if len(argv) > 1 else 20
    source = build_corpus(sections)
    print(f"{sections} element groups, {len(source):,} characters, {iterations} runs")

    started = time.perf_counter()
    for _ in range(iterations):
        parse(source)
    per_parse = (time.perf_counter() - started) / iterations
    print(f"mean parse time: {per_parse * 1000:.2f} ms")

    profiler = cProfile.Profile()
    with profiler:
        for _ in range(iterations):
            parse(source)

    report(profiler, pstats.SortKey.CUMULATIVE, "cumulative time")
    report(profiler, pstats.SortKey.TIME, "own time")


if __name__ == "__main__":
    main(sys.argv[1:])
