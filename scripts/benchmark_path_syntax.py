from __future__ import annotations

import argparse
import random
import time

from pathgrammar.syntax import check_search_pattern, get_root_length, split_directory_file

ROOT_SHAPES = ("C:\\", "D:", "\\\\fileserver\\share\\", "\\", "")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark root-length analysis and directory/file splitting")
    parser.add_argument("--paths", type=int, default=100000, help="Number of generated paths")
    parser.add_argument("--max-depth", type=int, default=12, help="Maximum number of segments per path")
    parser.add_argument("--seed", type=int, default=7, help="Random seed for the corpus")
    return parser.parse_args()


def build_corpus(total_paths: int, max_depth: int, seed: int) -> list[str]:
    rng = random.Random(seed)
    corpus: list[str] = []
    for path_idx in range(total_paths):
        root = rng.choice(ROOT_SHAPES)
        depth = rng.randint(1, max_depth)
        segments = [f"dir{rng.randint(0, 999)}" for _ in range(depth - 1)]
        segments.append(f"file{path_idx}.bin")
        path = root + "\\".join(segments)
        if rng.random() < 0.1:
            path += "\\"
        corpus.append(path)
    return corpus


def benchmark(corpus: list[str]) -> tuple[float, float, float]:
    start = time.perf_counter()
    for path in corpus:
        get_root_length(path)
    root_elapsed = time.perf_counter() - start

    start = time.perf_counter()
    for path in corpus:
        split_directory_file(path)
    split_elapsed = time.perf_counter() - start

    start = time.perf_counter()
    for path in corpus:
        check_search_pattern(path)
    pattern_elapsed = time.perf_counter() - start
    return root_elapsed, split_elapsed, pattern_elapsed


def main() -> None:
    args = parse_args()
    corpus = build_corpus(total_paths=args.paths, max_depth=args.max_depth, seed=args.seed)
    root_elapsed, split_elapsed, pattern_elapsed = benchmark(corpus)
    print(
        f"paths={len(corpus)} root_seconds={root_elapsed:.3f} "
        f"split_seconds={split_elapsed:.3f} pattern_seconds={pattern_elapsed:.3f}"
    )


if __name__ == "__main__":
    main()
