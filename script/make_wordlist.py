"""
Build a solver word list from a raw word file.

- Keeps only words of exactly N letters made of a–z (after lowercasing).
- Drops proper nouns if --skip-capitalized (e.g. /usr/share/dict/words).
- De-duplicates while preserving input order; optional --sort.

Usage:
    python -m script.make_wordlist --in /usr/share/dict/words --out data/all_word.txt --N 5
"""

import argparse

from wordle_resolver.datasets.io import read_lines, write_lines
from wordle_resolver.engine.letters import is_word


def unique_preserve_order(words):
    seen, out = set(), []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(lines, n: int, skip_capitalized: bool = False) -> list[str]:
    out = []
    for raw in lines:
        w = raw.strip()
        if skip_capitalized and w[:1].isupper():
            continue
        w = w.lower()
        if len(w) == n and is_word(w):
            out.append(w)
    return unique_preserve_order(out)


def main():
    ap = argparse.ArgumentParser(description="Extract N-letter words for the resolver")
    ap.add_argument("--in", dest="inp", required=True, help="raw word file, one word per line")
    ap.add_argument("--out", required=True, help="output word list")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--skip-capitalized", action="store_true", help="drop words starting with a capital")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise keep input order)")
    args = ap.parse_args()

    words = extract_words(read_lines(args.inp), args.N, args.skip_capitalized)
    if args.sort:
        words.sort()
    write_lines(words, args.out)
    print(f"Wrote {len(words)} {args.N}-letter words to {args.out}")


if __name__ == "__main__":
    main()
