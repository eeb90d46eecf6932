#!/usr/bin/env python3
"""
Synthetic corpus generator for parallel word count benchmarks.

Writes a text file of words drawn from a fixed vocabulary with Zipf-like
frequencies, separated by a mix of spaces, punctuation and newlines. The
same seed always produces the same file.
"""

import argparse
import random
import string
import sys

# Large buffer for efficient streaming writes
BUFFER_SIZE = 1024 * 1024  # 1MB

SEPARATORS = [" "] * 12 + [", ", ". ", "\n", "; ", " - ", "!\n"]


def build_vocabulary(size: int, rng: random.Random) -> list[str]:
    """Generate `size` distinct lowercase words of 1-12 letters."""
    words: set[str] = set()
    while len(words) < size:
        length = rng.randint(1, 12)
        words.add("".join(rng.choices(string.ascii_lowercase, k=length)))
    return sorted(words)


def generate_synthetic_text(
    output_path: str,
    num_words: int,
    vocab_size: int,
    zipf_s: float,
    seed: int,
) -> int:
    """
    Generate a synthetic corpus.

    Streams output in batches to keep memory flat.

    Returns:
        Total number of bytes written.
    """
    rng = random.Random(seed)
    vocab = build_vocabulary(vocab_size, rng)
    weights = [1.0 / (rank**zipf_s) for rank in range(1, vocab_size + 1)]

    total_bytes = 0
    batch = 10000

    with open(output_path, "w", encoding="ascii", buffering=BUFFER_SIZE) as f:
        written = 0
        while written < num_words:
            n = min(batch, num_words - written)
            words = rng.choices(vocab, weights=weights, k=n)
            seps = rng.choices(SEPARATORS, k=n)
            chunk = "".join(w + s for w, s in zip(words, seps, strict=True))
            f.write(chunk)
            total_bytes += len(chunk)
            written += n

            # Progress indicator every 1M words
            if written % 1_000_000 < batch:
                print(f"  Generated {written:,}/{num_words:,} words...", file=sys.stderr)

    return total_bytes


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic text corpus.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # ~60 MB of text
  python generate_synthetic_text.py --out data/synthetic.txt --words 10000000

  # Flatter distribution, bigger vocabulary
  python generate_synthetic_text.py --out data/flat.txt --vocab 200000 --zipf 0.8
""",
    )

    parser.add_argument("--out", required=True, help="Output file path")
    parser.add_argument(
        "--words",
        type=int,
        default=10_000_000,
        help="Number of words to write (default: 10000000)",
    )
    parser.add_argument(
        "--vocab",
        type=int,
        default=50_000,
        help="Number of distinct words (default: 50000)",
    )
    parser.add_argument(
        "--zipf",
        type=float,
        default=1.1,
        help="Zipf exponent for word frequencies (default: 1.1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=1,
        help="Random seed for reproducibility (default: 1)",
    )

    args = parser.parse_args()

    if args.words < 0:
        parser.error("--words must be non-negative")
    if args.vocab < 1:
        parser.error("--vocab must be at least 1")

    print("=" * 60, file=sys.stderr)
    print("Synthetic Text Generator", file=sys.stderr)
    print("=" * 60, file=sys.stderr)
    print(f"Output: {args.out}", file=sys.stderr)
    print(f"Words: {args.words:,}", file=sys.stderr)
    print(f"Vocabulary: {args.vocab:,}", file=sys.stderr)
    print(f"Zipf exponent: {args.zipf}", file=sys.stderr)
    print(f"Seed: {args.seed}", file=sys.stderr)
    print("=" * 60, file=sys.stderr)

    total_bytes = generate_synthetic_text(
        output_path=args.out,
        num_words=args.words,
        vocab_size=args.vocab,
        zipf_s=args.zipf,
        seed=args.seed,
    )

    print(f"Done! Wrote {total_bytes / (1024 * 1024):.1f} MB to {args.out}", file=sys.stderr)


if __name__ == "__main__":
    main()
